#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
特別格局（従格）の判定

極身強・極身弱（または旧方式のスコア閾値）の命式について、
通変星の分布から従旺格・従強格・従児格・従財格・従殺格・従勢格を選ぶ。
"""

import logging
from dataclasses import dataclass
from typing import Optional

from kakukyoku.analyzers.rules import Rule, RuleCascade
from kakukyoku.calculators.ten_god_distribution import TenGodDistribution
from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data import tables
from kakukyoku.models import PatternInfo, StrengthResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpecialContext:
    distribution: TenGodDistribution
    config: KakukyokuConfig


def pattern_info(pattern_type: str) -> PatternInfo:
    return PatternInfo(type=pattern_type, description=tables.PATTERN_DESCRIPTIONS[pattern_type])


def _pair_rule(pattern_type: str, pair) -> Rule:
    return Rule(
        name=pattern_type,
        predicate=lambda ctx: ctx.distribution.meets(pair, ctx.config.pair_threshold),
        resolver=lambda ctx: pattern_info(pattern_type),
    )


def is_momentum(distribution: TenGodDistribution, config: KakukyokuConfig) -> bool:
    """従勢格の条件：6種類の十神が閾値以上かつ均等に分布"""
    return (distribution.meets(tables.MOMENTUM_TEN_GODS, config.momentum_threshold)
            and distribution.is_evenly_distributed(tables.MOMENTUM_TEN_GODS, config.even_spread_ratio))


STRONG_RULES = (
    _pair_rule(tables.JUUOU, tables.COMPANION_PAIR),
    _pair_rule(tables.JUUKYOU, tables.RESOURCE_PAIR),
)

WEAK_RULES = (
    _pair_rule(tables.JUUJI, tables.OUTPUT_PAIR),
    _pair_rule(tables.JUUZAI, tables.WEALTH_PAIR),
    _pair_rule(tables.JUUSATSU, tables.OFFICER_PAIR),
    Rule(
        name=tables.JUUSEI,
        predicate=lambda ctx: is_momentum(ctx.distribution, ctx.config),
        resolver=lambda ctx: pattern_info(tables.JUUSEI),
    ),
)


class SpecialPatternAnalyzer:
    """特別格局の判定器"""

    def __init__(self, config: Optional[KakukyokuConfig] = None):
        self.config = config or get_config()
        self.strong_cascade = RuleCascade(
            STRONG_RULES, default=lambda ctx: pattern_info(tables.SPECIAL_STRONG_FALLBACK))
        self.weak_cascade = RuleCascade(
            WEAK_RULES, default=lambda ctx: pattern_info(tables.SPECIAL_WEAK_FALLBACK))

    def is_special(self, strength: StrengthResult, distribution: TenGodDistribution) -> bool:
        """
        特別格局に該当するか

        1. 中和は特別格局ではない
        2. 極身強：比肩+劫財 または 偏印+正印 が閾値以上
        3. 極身弱：食神+傷官・偏財+正財・偏官+正官 のいずれかが閾値以上、または従勢格の条件
        4. 旧方式：|スコア| が閾値以上で、5つのペアのいずれかが閾値以上
        """
        if strength.is_neutral:
            return False

        threshold = self.config.pair_threshold
        if strength.is_extreme_strong:
            if any(distribution.meets(pair, threshold) for pair in (tables.COMPANION_PAIR, tables.RESOURCE_PAIR)):
                return True

        if strength.is_extreme_weak:
            weak_pairs = (tables.OUTPUT_PAIR, tables.WEALTH_PAIR, tables.OFFICER_PAIR)
            if any(distribution.meets(pair, threshold) for pair in weak_pairs):
                return True
            if is_momentum(distribution, self.config):
                return True

        # 旧方式のスコア判定（互換性のため維持）
        if abs(strength.score) >= self.config.legacy_score_threshold:
            if any(distribution.meets(pair, threshold) for pair in tables.TEN_GOD_PAIRS):
                return True

        return False

    def classify(self, distribution: TenGodDistribution, is_strong: bool) -> PatternInfo:
        """
        特別格局のタイプを判定する

        Args:
            distribution: 通変星分布
            is_strong: 身強かどうか

        Returns:
            PatternInfo: いずれの閾値にも達しない場合は特殊身強格／特殊身弱格
        """
        context = SpecialContext(distribution=distribution, config=self.config)
        cascade = self.strong_cascade if is_strong else self.weak_cascade
        info, rule_name = cascade.evaluate_with_name(context)
        if rule_name is None:
            logger.info(f"⚠️ 特別格局の閾値に該当なし、汎用タイプを使用: {info.type}")
        return info


def determine_special_kakukyoku(distribution: TenGodDistribution, is_strong: bool,
                                config: Optional[KakukyokuConfig] = None) -> PatternInfo:
    return SpecialPatternAnalyzer(config).classify(distribution, is_strong)
