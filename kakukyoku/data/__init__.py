#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
記号と静的テーブル
"""

from .symbols import (
    Element,
    Polarity,
    PillarPosition,
    Stem,
    Branch,
    TenGod,
    STEM_ELEMENTS,
    STEM_POLARITIES,
)
from .tables import (
    BRANCH_ELEMENTS,
    STRONG_MONTHS,
    WEAK_MONTHS,
    KENROKU_COMBINATIONS,
    GETSUJIN_COMBINATIONS,
    TEN_GOD_PATTERNS,
    PATTERN_DESCRIPTIONS,
)

__all__ = [
    'Element',
    'Polarity',
    'PillarPosition',
    'Stem',
    'Branch',
    'TenGod',
    'STEM_ELEMENTS',
    'STEM_POLARITIES',
    'BRANCH_ELEMENTS',
    'STRONG_MONTHS',
    'WEAK_MONTHS',
    'KENROKU_COMBINATIONS',
    'GETSUJIN_COMBINATIONS',
    'TEN_GOD_PATTERNS',
    'PATTERN_DESCRIPTIONS',
]
