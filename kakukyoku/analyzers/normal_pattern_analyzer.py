#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
普通格局の判定

先勝ちの順で評価する:
1. 建禄格（日干と月支の組み合わせ）
2. 月刃格（日干と月支の組み合わせ）
3. 月支の蔵干と同じ五行の十干が月干にある → 月干の十神で格局を決める
4. 同じく年干にある → 年干の十神
5. 同じく時干にある → 時干の十神
6. 月支蔵干深浅表（簡略版のため現状は常に普通格）
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional

from kakukyoku.analyzers.rules import Rule, RuleCascade
from kakukyoku.analyzers.special_pattern_analyzer import pattern_info
from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data import tables
from kakukyoku.data.symbols import Branch, Element, PillarPosition, Stem, TenGod
from kakukyoku.models import FourPillars, PatternInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalContext:
    four_pillars: FourPillars
    stem_ten_gods: Mapping[PillarPosition, Optional[TenGod]]

    @property
    def month_hidden_elements(self) -> FrozenSet[Element]:
        return frozenset(h.stem.element for h in self.four_pillars.month.hidden_stems)

    def stem_in_month_hidden(self, position: PillarPosition) -> bool:
        return self.four_pillars.pillar(position).stem.element in self.month_hidden_elements


def is_kenroku_combination(day_stem: Stem, month_branch: Branch) -> bool:
    return tables.KENROKU_COMBINATIONS[day_stem] == month_branch


def is_getsujin_combination(day_stem: Stem, month_branch: Branch) -> bool:
    return tables.GETSUJIN_COMBINATIONS[day_stem] == month_branch


def ten_god_pattern(ten_god: Optional[TenGod]) -> PatternInfo:
    """十神から普通格局を引く（十神が不明なら普通格）"""
    if ten_god is None:
        return pattern_info(tables.FUTSUU)
    return pattern_info(tables.TEN_GOD_PATTERNS[ten_god])


def month_branch_depth_pattern(month_branch: Branch, day_stem: Stem) -> PatternInfo:
    """
    月支蔵干深浅表による判定

    深浅表のデータがまだ無いため、月支・日干によらず普通格を返す。
    """
    return pattern_info(tables.FUTSUU)


def _exposed_stem_rule(position: PillarPosition) -> Rule:
    return Rule(
        name=f"{position.value}_stem_in_month_hidden",
        predicate=lambda ctx: ctx.stem_in_month_hidden(position),
        resolver=lambda ctx: ten_god_pattern(ctx.stem_ten_gods.get(position)),
    )


NORMAL_RULES = (
    Rule(
        name='kenroku',
        predicate=lambda ctx: is_kenroku_combination(ctx.four_pillars.day_master, ctx.four_pillars.month.branch),
        resolver=lambda ctx: pattern_info(tables.KENROKU),
    ),
    Rule(
        name='getsujin',
        predicate=lambda ctx: is_getsujin_combination(ctx.four_pillars.day_master, ctx.four_pillars.month.branch),
        resolver=lambda ctx: pattern_info(tables.GETSUJIN),
    ),
    _exposed_stem_rule(PillarPosition.MONTH),
    _exposed_stem_rule(PillarPosition.YEAR),
    _exposed_stem_rule(PillarPosition.HOUR),
)


class NormalPatternAnalyzer:
    """普通格局の判定器"""

    def __init__(self, config: Optional[KakukyokuConfig] = None):
        self.config = config or get_config()
        self.cascade = RuleCascade(
            NORMAL_RULES,
            default=lambda ctx: month_branch_depth_pattern(ctx.four_pillars.month.branch,
                                                           ctx.four_pillars.day_master),
        )

    def classify(self, four_pillars: FourPillars,
                 stem_ten_gods: Optional[Mapping[PillarPosition, Optional[TenGod]]] = None) -> PatternInfo:
        """
        普通格局のタイプを判定する

        Args:
            four_pillars: 四柱
            stem_ten_gods: 年干・月干・時干の十神（省略時は四柱の注記）

        Returns:
            PatternInfo: 必ず値を返す
        """
        if stem_ten_gods is None:
            stem_ten_gods = four_pillars.stem_ten_gods()
        context = NormalContext(four_pillars=four_pillars, stem_ten_gods=stem_ten_gods)
        info, rule_name = self.cascade.evaluate_with_name(context)
        logger.debug(f"普通格局: {info.type} (ルール: {rule_name or 'month_branch_depth'})")
        return info


def determine_normal_kakukyoku(four_pillars: FourPillars,
                               stem_ten_gods: Optional[Mapping[PillarPosition, Optional[TenGod]]] = None,
                               config: Optional[KakukyokuConfig] = None) -> PatternInfo:
    return NormalPatternAnalyzer(config).classify(four_pillars, stem_ten_gods)
