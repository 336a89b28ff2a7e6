#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
格局判定分析器パッケージ
"""

from .rules import Rule, RuleCascade
from .special_pattern_analyzer import SpecialPatternAnalyzer, determine_special_kakukyoku
from .normal_pattern_analyzer import NormalPatternAnalyzer, determine_normal_kakukyoku

__all__ = [
    'Rule',
    'RuleCascade',
    'SpecialPatternAnalyzer',
    'determine_special_kakukyoku',
    'NormalPatternAnalyzer',
    'determine_normal_kakukyoku',
]
