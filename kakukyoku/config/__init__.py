# -*- coding: utf-8 -*-
"""
設定モジュール
"""

from .kakukyoku_config import KakukyokuConfig, get_config, reload_config

__all__ = ['KakukyokuConfig', 'get_config', 'reload_config']
