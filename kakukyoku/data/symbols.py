#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱記号定義

十干・十二支・五行・十神・柱の位置を閉じた列挙型として定義する。
文字列からの変換は parse() で行い、未知の記号は ValueError とする。
"""

from enum import Enum
from typing import Dict, Union


class Element(Enum):
    """五行"""
    WOOD = '木'
    FIRE = '火'
    EARTH = '土'
    METAL = '金'
    WATER = '水'

    def __str__(self):
        return self.value


class Polarity(Enum):
    """陰陽"""
    YANG = '陽'
    YIN = '陰'

    def __str__(self):
        return self.value


class PillarPosition(Enum):
    """柱の位置（年・月・日・時）"""
    YEAR = 'year'
    MONTH = 'month'
    DAY = 'day'
    HOUR = 'hour'

    def __str__(self):
        return self.value


class _SymbolEnum(Enum):
    """一文字記号の列挙型に共通の parse()"""

    @classmethod
    def parse(cls, value: Union[str, 'Enum']):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            raise ValueError(f"未知の{cls._label()}: {value!r}") from None

    @classmethod
    def _label(cls) -> str:
        return cls.__name__

    def __str__(self):
        return self.value


class Stem(_SymbolEnum):
    """十干"""
    JIA = '甲'
    YI = '乙'
    BING = '丙'
    DING = '丁'
    WU = '戊'
    JI = '己'
    GENG = '庚'
    XIN = '辛'
    REN = '壬'
    GUI = '癸'

    @classmethod
    def _label(cls) -> str:
        return '天干'

    @property
    def element(self) -> Element:
        return STEM_ELEMENTS[self]

    @property
    def polarity(self) -> Polarity:
        return STEM_POLARITIES[self]


class Branch(_SymbolEnum):
    """十二支"""
    ZI = '子'
    CHOU = '丑'
    YIN = '寅'
    MAO = '卯'
    CHEN = '辰'
    SI = '巳'
    WU = '午'
    WEI = '未'
    SHEN = '申'
    YOU = '酉'
    XU = '戌'
    HAI = '亥'

    @classmethod
    def _label(cls) -> str:
        return '地支'


class TenGod(_SymbolEnum):
    """十神（通変星）"""
    BIJIAN = '比肩'
    JIECAI = '劫財'
    SHISHEN = '食神'
    SHANGGUAN = '傷官'
    PIANCAI = '偏財'
    ZHENGCAI = '正財'
    PIANGUAN = '偏官'
    ZHENGGUAN = '正官'
    PIANYIN = '偏印'
    ZHENGYIN = '正印'

    @classmethod
    def _label(cls) -> str:
        return '十神'

    @classmethod
    def parse(cls, value: Union[str, 'TenGod']) -> 'TenGod':
        if isinstance(value, str):
            value = TEN_GOD_ALIASES.get(value.strip(), value)
        return super().parse(value)


STEM_ELEMENTS: Dict[Stem, Element] = {
    Stem.JIA: Element.WOOD,
    Stem.YI: Element.WOOD,
    Stem.BING: Element.FIRE,
    Stem.DING: Element.FIRE,
    Stem.WU: Element.EARTH,
    Stem.JI: Element.EARTH,
    Stem.GENG: Element.METAL,
    Stem.XIN: Element.METAL,
    Stem.REN: Element.WATER,
    Stem.GUI: Element.WATER,
}

STEM_POLARITIES: Dict[Stem, Polarity] = {
    stem: (Polarity.YANG if index % 2 == 0 else Polarity.YIN)
    for index, stem in enumerate(Stem)
}

# 中国語表記の十神名
TEN_GOD_ALIASES: Dict[str, str] = {
    '七杀': '偏官',
    '七殺': '偏官',
    '伤官': '傷官',
    '劫财': '劫財',
    '偏财': '偏財',
    '正财': '正財',
}
