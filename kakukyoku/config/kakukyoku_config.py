#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定の設定

閾値はすべてここに集約する。JSON ファイルから上書きでき、
読み込めない場合は既定値を使う。
"""

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KakukyokuConfig:
    """格局判定の閾値設定"""
    # 特別格局：十神ペアの割合閾値（以上）
    pair_threshold: float = 0.3
    # 従勢格：6種類の十神の合計割合閾値（以上）
    momentum_threshold: float = 0.6
    # 従勢格：最小値／最大値の比率（以上で均等分布）
    even_spread_ratio: float = 0.5
    # 旧方式：|スコア| がこの値以上で特別格局候補
    legacy_score_threshold: int = 4
    # 条件A：得令・失令の加減点
    seasonal_score: int = 2
    # 条件B：地支の本数閾値
    strong_branch_min: int = 2
    weak_branch_min: int = 3
    # 条件C：天干の本数閾値
    strong_stem_min: int = 2
    weak_stem_min: int = 2
    # スコアによる身強・身弱の判定（score > strong_score_cutoff で身強）
    strong_score_cutoff: int = 1
    weak_score_cutoff: int = -1
    # 蔵干の重み（未指定時）
    default_hidden_weight: float = 1.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'KakukyokuConfig':
        """
        辞書から設定を作成する

        未知のキー、型が合わない値は警告して無視し、そのキーは既定値のままにする。

        Args:
            data: 設定値の辞書

        Returns:
            KakukyokuConfig
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"⚠️ 未知の設定キーを無視: {key}")
                continue
            try:
                values[key] = _coerce(value, getattr(cls, key))
            except (TypeError, ValueError) as e:
                logger.warning(f"⚠️ 設定値が不正なため既定値を使用: {key}={value!r} ({e})")
        return cls(**values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'KakukyokuConfig':
        """
        JSON ファイルから設定を読み込む

        ファイルが存在しない・壊れている場合は既定値を返す。
        値の型が合わないキーだけは既定値のまま、他のキーは反映する。
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"⚠️ 設定ファイルが存在しないため既定値を使用: {path}")
            return cls()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"⚠️ 設定ファイルの読み込みに失敗、既定値を使用: {path}: {e}")
            return cls()
        if not isinstance(data, dict):
            logger.warning(f"⚠️ 設定ファイルの形式が不正、既定値を使用: {path}")
            return cls()
        config = cls.from_dict(data)
        logger.info(f"✅ 格局判定設定を読み込み: {path}")
        return config

    def with_overrides(self, **overrides) -> 'KakukyokuConfig':
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _coerce(value: Any, default: Union[int, float]) -> Union[int, float]:
    """既定値と同じ型に変換する（整数の設定に小数は不可）"""
    if value is None or isinstance(value, bool):
        raise TypeError(f"数値ではありません: {value!r}")
    if isinstance(default, int):
        if isinstance(value, int):
            return value
        number = float(value)
        if not number.is_integer():
            raise ValueError(f"整数ではありません: {value!r}")
        return int(number)
    return float(value)


# グローバル設定（シングルトン）
_config: Optional[KakukyokuConfig] = None
_config_path: Optional[Path] = None


def get_config() -> KakukyokuConfig:
    """グローバル設定を取得する"""
    global _config
    if _config is None:
        _config = KakukyokuConfig.from_file(_config_path) if _config_path else KakukyokuConfig()
    return _config


def reload_config(path: Optional[Union[str, Path]] = None) -> KakukyokuConfig:
    """
    設定を再読み込みする

    Args:
        path: JSON 設定ファイル。None の場合は前回のパス（なければ既定値）
    """
    global _config, _config_path
    if path is not None:
        _config_path = Path(path)
    _config = KakukyokuConfig.from_file(_config_path) if _config_path else KakukyokuConfig()
    return _config
