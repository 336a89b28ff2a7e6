#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定エンジン

1. 身強・身弱の判定（条件A・B・C方式）
2. 特別格局か普通格局かの判定
3. 具体的な格局タイプの判定
"""

import logging
from typing import Optional

from kakukyoku.analyzers.normal_pattern_analyzer import NormalPatternAnalyzer
from kakukyoku.analyzers.special_pattern_analyzer import SpecialPatternAnalyzer
from kakukyoku.calculators.strength import StrengthEvaluator, TenGodMap, normalize_ten_gods
from kakukyoku.calculators.ten_god_distribution import TenGodDistributionAnalyzer
from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data.tables import EXTREME_STRONG_LABEL, EXTREME_WEAK_LABEL
from kakukyoku.models import FourPillars, KakukyokuResult

logger = logging.getLogger(__name__)


class KakukyokuEngine:
    """格局判定エンジン（状態を持たないので並行呼び出し可）"""

    def __init__(self, config: Optional[KakukyokuConfig] = None):
        self.config = config or get_config()
        self.strength_evaluator = StrengthEvaluator(self.config)
        self.distribution_analyzer = TenGodDistributionAnalyzer(self.config)
        self.special_analyzer = SpecialPatternAnalyzer(self.config)
        self.normal_analyzer = NormalPatternAnalyzer(self.config)

    def determine(self, four_pillars: FourPillars, ten_gods: Optional[TenGodMap] = None) -> KakukyokuResult:
        """
        格局を判定する

        Args:
            four_pillars: 十神注記済みの四柱
            ten_gods: 年干・月干・時干の十神（省略時は四柱の注記を使う）

        Returns:
            KakukyokuResult
        """
        logger.info(f"🔍 格局判定開始: {four_pillars}")

        stem_ten_gods = normalize_ten_gods(four_pillars, ten_gods)
        strength = self.strength_evaluator.evaluate(four_pillars, stem_ten_gods)
        distribution = self.distribution_analyzer.analyze(four_pillars)

        is_special = self.special_analyzer.is_special(strength, distribution)
        extreme_type = ''
        if is_special:
            info = self.special_analyzer.classify(distribution, strength.is_strong)
            if strength.is_extreme_strong:
                extreme_type = EXTREME_STRONG_LABEL
            elif strength.is_extreme_weak:
                extreme_type = EXTREME_WEAK_LABEL
        else:
            info = self.normal_analyzer.classify(four_pillars, stem_ten_gods)

        result = KakukyokuResult(
            type=info.type,
            category='special' if is_special else 'normal',
            strength=strength.strength,
            description=info.description,
            extreme_type=extreme_type,
            is_extreme_strong=strength.is_extreme_strong,
            is_extreme_weak=strength.is_extreme_weak,
            score=strength.score,
            details=strength.details,
        )
        logger.info(f"✅ 格局判定完了: {result.type} ({result.category}, {result.strength}, スコア={result.score})")
        return result


def determine_kakukyoku(four_pillars: FourPillars, ten_gods: Optional[TenGodMap] = None,
                        config: Optional[KakukyokuConfig] = None) -> KakukyokuResult:
    """KakukyokuEngine の簡易呼び出し"""
    return KakukyokuEngine(config).determine(four_pillars, ten_gods)
