#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日干を強める／弱める五行

- 強める：日干と同じ五行、日干を生じる五行（印）
- 弱める：日干を剋する五行（官殺）、日干が剋する五行（財）

地支は複数の五行を持つため、いずれか一つでも該当すれば強める／弱めるとみなす。
"""

from typing import Dict, FrozenSet

from kakukyoku.data.symbols import Branch, Element
from kakukyoku.data.tables import BRANCH_ELEMENTS, STRONG_MONTHS, WEAK_MONTHS

# 相生：key を生じる五行
PRODUCED_BY: Dict[Element, Element] = {
    Element.WOOD: Element.WATER,
    Element.FIRE: Element.WOOD,
    Element.EARTH: Element.FIRE,
    Element.METAL: Element.EARTH,
    Element.WATER: Element.METAL,
}

# 相剋：key が剋する五行
CONTROLS: Dict[Element, Element] = {
    Element.WOOD: Element.EARTH,
    Element.FIRE: Element.METAL,
    Element.EARTH: Element.WATER,
    Element.METAL: Element.WOOD,
    Element.WATER: Element.FIRE,
}

# 相剋：key を剋する五行
CONTROLLED_BY: Dict[Element, Element] = {target: source for source, target in CONTROLS.items()}


def supporting_elements(day_element: Element) -> FrozenSet[Element]:
    """日干を強める五行（同じ五行と、日干を生じる五行）"""
    return frozenset({day_element, PRODUCED_BY[day_element]})


def weakening_elements(day_element: Element) -> FrozenSet[Element]:
    """日干を弱める五行（日干を剋する五行と、日干が剋する五行）"""
    return frozenset({CONTROLLED_BY[day_element], CONTROLS[day_element]})


def is_branch_supportive(day_element: Element, branch: Branch) -> bool:
    """地支が持つ五行のうち、日干を強める五行があるか"""
    return not supporting_elements(day_element).isdisjoint(BRANCH_ELEMENTS[branch])


def is_branch_weakening(day_element: Element, branch: Branch) -> bool:
    """地支が持つ五行のうち、日干を弱める五行があるか"""
    return not weakening_elements(day_element).isdisjoint(BRANCH_ELEMENTS[branch])


def is_strong_month(element: Element, month_branch: Branch) -> bool:
    return month_branch in STRONG_MONTHS[element]


def is_weak_month(element: Element, month_branch: Branch) -> bool:
    return month_branch in WEAK_MONTHS[element]
