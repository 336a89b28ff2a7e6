#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
身強・身弱判定（条件A・B・C方式）

条件A: 得令／失令（月支と日干の五行）
条件B: 日干を強める／弱める地支の本数
条件C: 日干を強める／弱める天干の本数

強める方向と弱める方向をそれぞれ独立に評価し、スコアを合算する。
A・B・C がすべて同じ方向で成立すれば極身強／極身弱。
"""

import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Union

from kakukyoku.calculators.element_relations import (
    is_branch_supportive,
    is_branch_weakening,
    is_strong_month,
    is_weak_month,
)
from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data.symbols import PillarPosition, TenGod
from kakukyoku.data.tables import STRENGTHENING_TEN_GODS, WEAKENING_TEN_GODS
from kakukyoku.models import BRANCH_POSITIONS, STEM_POSITIONS, FourPillars, StrengthResult

logger = logging.getLogger(__name__)

TenGodMap = Mapping[Union[PillarPosition, str], Optional[Union[TenGod, str]]]


@dataclass(frozen=True)
class ConditionTally:
    """1条件・1方向の評価結果"""
    satisfied: bool
    count: int
    score: int
    details: Tuple[str, ...]


def normalize_ten_gods(four_pillars: FourPillars, ten_gods: Optional[TenGodMap] = None) -> Dict[PillarPosition, Optional[TenGod]]:
    """
    天干の十神マップを正規化する

    明示的に渡されたマップを優先し、欠けている柱は四柱の注記で補う。
    値が None または空文字の柱は十神なしとして扱う。
    """
    normalized = four_pillars.stem_ten_gods()
    for key, value in (ten_gods or {}).items():
        position = key if isinstance(key, PillarPosition) else PillarPosition(key)
        if position not in normalized:
            continue
        if value is None or (isinstance(value, str) and not value.strip()):
            normalized[position] = None
        else:
            normalized[position] = TenGod.parse(value)
    return normalized


class StrengthEvaluator:
    """身強・身弱の判定器"""

    def __init__(self, config: Optional[KakukyokuConfig] = None):
        self.config = config or get_config()

    def evaluate(self, four_pillars: FourPillars, ten_gods: Optional[TenGodMap] = None) -> StrengthResult:
        """
        身強・身弱を判定する

        Args:
            four_pillars: 四柱
            ten_gods: 年干・月干・時干の十神（省略時は四柱の注記を使う）

        Returns:
            StrengthResult: 判定結果と評価順の詳細トレース
        """
        stem_ten_gods = normalize_ten_gods(four_pillars, ten_gods)

        tallies = {
            'A_Strong': self._seasonal_strong(four_pillars),
            'B_Strong': self._branches_strong(four_pillars),
            'C_Strong': self._stems_strong(four_pillars, stem_ten_gods),
            'A_Weak': self._seasonal_weak(four_pillars),
            'B_Weak': self._branches_weak(four_pillars),
            'C_Weak': self._stems_weak(four_pillars, stem_ten_gods),
        }

        score = sum(t.score for t in tallies.values())
        details = [line for t in tallies.values() for line in t.details]
        condition_results = {key: t.satisfied for key, t in tallies.items()}

        is_extreme_strong = all(condition_results[k] for k in ('A_Strong', 'B_Strong', 'C_Strong'))
        is_extreme_weak = all(condition_results[k] for k in ('A_Weak', 'B_Weak', 'C_Weak'))

        # スコアによる判定も併用する
        is_strong = is_extreme_strong or score > self.config.strong_score_cutoff
        is_weak = is_extreme_weak or score < self.config.weak_score_cutoff
        is_neutral = not is_strong and not is_weak

        details.append(f"総合スコア: {score}")
        if is_extreme_strong:
            details.append('最終判定: 極身強（条件A・B・Cすべて満たす）')
        elif is_extreme_weak:
            details.append('最終判定: 極身弱（条件A・B・Cすべて満たす）')
        elif is_strong:
            details.append('最終判定: 身強')
        elif is_weak:
            details.append('最終判定: 身弱')
        else:
            details.append('最終判定: 中和')

        logger.debug(f"身強弱判定: {four_pillars} スコア={score} 条件={condition_results}")

        return StrengthResult(
            is_strong=is_strong,
            is_neutral=is_neutral,
            is_extreme_strong=is_extreme_strong,
            is_extreme_weak=is_extreme_weak,
            score=score,
            condition_results=condition_results,
            details=tuple(details),
        )

    # ---- 条件A ----

    def _seasonal_strong(self, four_pillars: FourPillars) -> ConditionTally:
        element = four_pillars.day_master.element
        month_branch = four_pillars.month.branch
        if not is_strong_month(element, month_branch):
            return ConditionTally(False, 0, 0, ())
        return ConditionTally(
            True, 1, self.config.seasonal_score,
            (f"条件A(極身強): 得令 - {element.value}は{month_branch.value}月に強まる",),
        )

    def _seasonal_weak(self, four_pillars: FourPillars) -> ConditionTally:
        element = four_pillars.day_master.element
        month_branch = four_pillars.month.branch
        if not is_weak_month(element, month_branch):
            return ConditionTally(False, 0, 0, ())
        return ConditionTally(
            True, 1, -self.config.seasonal_score,
            (f"条件A(極身弱): 失令 - {element.value}は{month_branch.value}月に弱まる",),
        )

    # ---- 条件B ----

    def _branches_strong(self, four_pillars: FourPillars) -> ConditionTally:
        element = four_pillars.day_master.element
        details = []
        for position in BRANCH_POSITIONS:
            branch = four_pillars.pillar(position).branch
            if is_branch_supportive(element, branch):
                details.append(f"条件B(極身強): {position.value}支({branch.value})が日干を強める")
        count = len(details)
        satisfied = count >= self.config.strong_branch_min
        if satisfied:
            details.append(
                f"条件B(極身強): {self.config.strong_branch_min}つ以上の地支が日干を強める（{count}個）"
            )
        return ConditionTally(satisfied, count, count, tuple(details))

    def _branches_weak(self, four_pillars: FourPillars) -> ConditionTally:
        element = four_pillars.day_master.element
        details = []
        for position in BRANCH_POSITIONS:
            branch = four_pillars.pillar(position).branch
            if is_branch_weakening(element, branch):
                details.append(f"条件B(極身弱): {position.value}支({branch.value})が日干を弱める")
        count = len(details)
        satisfied = count >= self.config.weak_branch_min
        if satisfied:
            details.append(
                f"条件B(極身弱): {self.config.weak_branch_min}つ以上の地支が日干を弱める（{count}個）"
            )
        return ConditionTally(satisfied, count, -count, tuple(details))

    # ---- 条件C ----

    def _stems_strong(self, four_pillars: FourPillars, stem_ten_gods: Mapping[PillarPosition, Optional[TenGod]]) -> ConditionTally:
        day_master = four_pillars.day_master
        details = []
        for position in STEM_POSITIONS:
            stem = four_pillars.pillar(position).stem
            relation = stem_ten_gods.get(position)
            if stem == day_master:
                details.append(f"条件C(極身強): {position.value}干({stem.value})が日干と同じで強める")
            elif relation in STRENGTHENING_TEN_GODS:
                details.append(
                    f"条件C(極身強): {position.value}干({stem.value})の十神関係({relation.value})が日干を強める"
                )
        count = len(details)
        satisfied = count >= self.config.strong_stem_min
        if satisfied:
            details.append(
                f"条件C(極身強): {self.config.strong_stem_min}つ以上の天干が日干を強める（{count}個）"
            )
        return ConditionTally(satisfied, count, count, tuple(details))

    def _stems_weak(self, four_pillars: FourPillars, stem_ten_gods: Mapping[PillarPosition, Optional[TenGod]]) -> ConditionTally:
        details = []
        for position in STEM_POSITIONS:
            stem = four_pillars.pillar(position).stem
            relation = stem_ten_gods.get(position)
            if relation in WEAKENING_TEN_GODS:
                details.append(
                    f"条件C(極身弱): {position.value}干({stem.value})の十神関係({relation.value})が日干を弱める"
                )
        count = len(details)
        satisfied = count >= self.config.weak_stem_min
        if satisfied:
            details.append(
                f"条件C(極身弱): {self.config.weak_stem_min}つ以上の天干が日干を弱める（{count}個）"
            )
        return ConditionTally(satisfied, count, -count, tuple(details))


def determine_strength(four_pillars: FourPillars, ten_gods: Optional[TenGodMap] = None,
                       config: Optional[KakukyokuConfig] = None) -> StrengthResult:
    """StrengthEvaluator の簡易呼び出し"""
    return StrengthEvaluator(config).evaluate(four_pillars, ten_gods)
