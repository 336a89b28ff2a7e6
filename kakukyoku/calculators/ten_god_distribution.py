#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
通変星（十神）分布の集計

地支・天干（年・月・時）・蔵干の十神を重み付きで数える。
合計が 0 の場合、割合はすべて 0 として扱う。
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from kakukyoku.config import KakukyokuConfig, get_config
from kakukyoku.data.symbols import TenGod
from kakukyoku.models import BRANCH_POSITIONS, STEM_POSITIONS, FourPillars

logger = logging.getLogger(__name__)


class TenGodDistribution:
    """十神ごとの重み付き出現数"""

    def __init__(self, counts: Optional[Mapping[TenGod, float]] = None):
        values = {ten_god: 0 for ten_god in TenGod}
        for ten_god, count in (counts or {}).items():
            values[TenGod.parse(ten_god)] += count
        self._counts = MappingProxyType(values)

    @property
    def counts(self) -> Mapping[TenGod, float]:
        return self._counts

    @property
    def total(self) -> float:
        return sum(self._counts.values())

    def count(self, ten_god: TenGod) -> float:
        return self._counts[ten_god]

    def group_count(self, ten_gods: Iterable[TenGod]) -> float:
        return sum(self._counts[t] for t in ten_gods)

    def ratio(self, ten_gods: Iterable[TenGod]) -> float:
        """指定した十神の合計が全体に占める割合（合計 0 なら 0）"""
        total = self.total
        if total <= 0:
            return 0.0
        return self.group_count(ten_gods) / total

    def meets(self, ten_gods: Iterable[TenGod], threshold: float) -> bool:
        """割合が閾値以上か（合計 0 なら常に False）"""
        if self.total <= 0:
            return False
        return self.ratio(ten_gods) >= threshold

    def is_evenly_distributed(self, ten_gods: Iterable[TenGod], min_max_ratio: float = 0.5) -> bool:
        """
        指定した十神が均等に分布しているか

        最大値が 0 なら均等ではない。最小値／最大値が min_max_ratio 以上なら均等。
        """
        values = [self._counts[t] for t in ten_gods]
        if not values:
            return False
        largest = max(values)
        if largest <= 0:
            return False
        return min(values) / largest >= min_max_ratio

    def to_dict(self) -> Dict[str, float]:
        return {ten_god.value: count for ten_god, count in self._counts.items()}

    def __eq__(self, other):
        if not isinstance(other, TenGodDistribution):
            return NotImplemented
        return dict(self._counts) == dict(other._counts)

    def __repr__(self):
        return f"TenGodDistribution({self.to_dict()!r})"


class TenGodDistributionAnalyzer:
    """通変星分布の集計器"""

    def __init__(self, config: Optional[KakukyokuConfig] = None):
        self.config = config or get_config()

    def analyze(self, four_pillars: FourPillars) -> TenGodDistribution:
        """
        四柱の十神を重み付きで集計する

        - 地支の十神：年・月・日・時（各 1）
        - 天干の十神：年・月・時（各 1、日干は基準なので数えない）
        - 蔵干の十神：全柱（重み未指定なら既定の重み）

        Args:
            four_pillars: 十神注記済みの四柱

        Returns:
            TenGodDistribution
        """
        counts: Dict[TenGod, float] = {ten_god: 0 for ten_god in TenGod}

        for position in STEM_POSITIONS:
            ten_god = four_pillars.pillar(position).stem_ten_god
            if ten_god is not None:
                counts[ten_god] += 1

        for position in BRANCH_POSITIONS:
            ten_god = four_pillars.pillar(position).branch_ten_god
            if ten_god is not None:
                counts[ten_god] += 1

        for position in BRANCH_POSITIONS:
            for hidden in four_pillars.pillar(position).hidden_stems:
                if hidden.ten_god is None:
                    continue
                weight = self.config.default_hidden_weight if hidden.weight is None else hidden.weight
                counts[hidden.ten_god] += max(weight, 0)

        distribution = TenGodDistribution(counts)
        logger.debug(f"通変星分布: {distribution.to_dict()} 合計={distribution.total}")
        return distribution


def count_ten_gods(four_pillars: FourPillars, config: Optional[KakukyokuConfig] = None) -> TenGodDistribution:
    """TenGodDistributionAnalyzer の簡易呼び出し"""
    return TenGodDistributionAnalyzer(config).analyze(four_pillars)
