#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定結果の整形

- プロフィール表示用の説明文
- 通変星ペア分布の内訳（判定理由の確認用）
"""

from typing import Any, Dict, List, Optional

from kakukyoku.calculators.ten_god_distribution import TenGodDistribution
from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data import tables
from kakukyoku.models import KakukyokuResult

# 身弱の場合に閾値を超えたペアが示す特別格局
WEAK_PAIR_PATTERNS = {
    tables.OUTPUT_PAIR: tables.JUUJI,
    tables.WEALTH_PAIR: tables.JUUZAI,
    tables.OFFICER_PAIR: tables.JUUSATSU,
}
STRONG_PAIR_PATTERNS = {
    tables.COMPANION_PAIR: tables.JUUOU,
    tables.RESOURCE_PAIR: tables.JUUKYOU,
}


def format_kakukyoku_description(result: KakukyokuResult) -> str:
    """
    プロフィール向けの説明文を作る

    例: あなたの格局（気質タイプ）は「建禄格」（身強）です。独立心が強く…
    """
    strength_label = tables.STRENGTH_LABELS.get(result.strength, tables.STRENGTH_LABELS['neutral'])
    return f"あなたの格局（気質タイプ）は「{result.type}」（{strength_label}）です。{result.description}"


def describe_distribution(distribution: TenGodDistribution,
                          config: Optional[KakukyokuConfig] = None) -> List[Dict[str, Any]]:
    """
    十神ペアごとの出現数・割合と、特別格局の閾値を超えたかを返す

    Args:
        distribution: 通変星分布
        config: 閾値設定

    Returns:
        ペアごとの辞書のリスト（ペアの順は比劫・食傷・財・官殺・印）
    """
    config = config or get_config()
    rows = []
    for pair in tables.TEN_GOD_PAIRS:
        ratio = distribution.ratio(pair)
        rows.append({
            'pair': '・'.join(t.value for t in pair),
            'count': distribution.group_count(pair),
            'total': distribution.total,
            'percentage': round(ratio * 100, 2),
            'meets_threshold': distribution.meets(pair, config.pair_threshold),
            'strong_pattern': STRONG_PAIR_PATTERNS.get(pair),
            'weak_pattern': WEAK_PAIR_PATTERNS.get(pair),
        })
    return rows
