#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定パッケージのログ設定

呼び出し側サービスのクライアントが切断して出力先が閉じていても、
ログ出力で例外を出さないハンドラを提供する。
"""

import logging

PACKAGE_LOGGER = 'kakukyoku'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """出力先が閉じている場合（Broken pipe 等）は黙って捨てる StreamHandler"""

    def emit(self, record):
        try:
            msg = self.format(record)
            self.stream.write(msg + self.terminator)
            self.flush()
        except (BrokenPipeError, OSError):
            pass
        except Exception:
            self.handleError(record)


def configure_logging(level=logging.INFO) -> logging.Logger:
    """
    パッケージロガー（kakukyoku.*）に SafeStreamHandler を一度だけ付与する

    Args:
        level: ログレベル

    Returns:
        logging.Logger: パッケージロガー
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, SafeStreamHandler) for h in logger.handlers):
        handler = SafeStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
