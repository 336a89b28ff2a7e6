#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定の計算モジュール

- 五行生克関係
- 通変星分布の集計
- 身強・身弱判定
"""

from .element_relations import (
    CONTROLLED_BY,
    CONTROLS,
    PRODUCED_BY,
    supporting_elements,
    weakening_elements,
)
from .ten_god_distribution import (
    TenGodDistribution,
    TenGodDistributionAnalyzer,
    count_ten_gods,
)
from .strength import (
    StrengthEvaluator,
    determine_strength,
)

__all__ = [
    'CONTROLLED_BY',
    'CONTROLS',
    'PRODUCED_BY',
    'supporting_elements',
    'weakening_elements',
    'TenGodDistribution',
    'TenGodDistributionAnalyzer',
    'count_ten_gods',
    'StrengthEvaluator',
    'determine_strength',
]
