#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱推命 格局判定エンジン

十神注記済みの四柱から、身強・身弱と格局（特別格局／普通格局）を判定する。
"""

from .data.symbols import Branch, Element, PillarPosition, Polarity, Stem, TenGod
from .models import (
    FourPillars,
    HiddenStem,
    KakukyokuInputError,
    KakukyokuResult,
    PatternInfo,
    Pillar,
    StrengthResult,
)
from .config import KakukyokuConfig, get_config, reload_config
from .calculators import (
    StrengthEvaluator,
    TenGodDistribution,
    TenGodDistributionAnalyzer,
    count_ten_gods,
    determine_strength,
)
from .analyzers import NormalPatternAnalyzer, SpecialPatternAnalyzer
from .engine import KakukyokuEngine, determine_kakukyoku
from .kakukyoku_logging import configure_logging
from .formatters import describe_distribution, format_kakukyoku_description

__version__ = '1.0.0'

__all__ = [
    'Branch',
    'Element',
    'PillarPosition',
    'Polarity',
    'Stem',
    'TenGod',
    'FourPillars',
    'HiddenStem',
    'KakukyokuInputError',
    'KakukyokuResult',
    'PatternInfo',
    'Pillar',
    'StrengthResult',
    'KakukyokuConfig',
    'get_config',
    'reload_config',
    'StrengthEvaluator',
    'TenGodDistribution',
    'TenGodDistributionAnalyzer',
    'count_ten_gods',
    'determine_strength',
    'NormalPatternAnalyzer',
    'SpecialPatternAnalyzer',
    'KakukyokuEngine',
    'determine_kakukyoku',
    'configure_logging',
    'describe_distribution',
    'format_kakukyoku_description',
]
