#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定の入出力モデル

四柱（入力）と身強弱・格局の判定結果（出力）。いずれも不変の値オブジェクト。
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from kakukyoku.data.symbols import Branch, PillarPosition, Stem, TenGod

CONDITION_KEYS = ('A_Strong', 'B_Strong', 'C_Strong', 'A_Weak', 'B_Weak', 'C_Weak')

# 天干の十神を参照する柱（日干は自分自身なので含めない）
STEM_POSITIONS = (PillarPosition.YEAR, PillarPosition.MONTH, PillarPosition.HOUR)
BRANCH_POSITIONS = (PillarPosition.YEAR, PillarPosition.MONTH, PillarPosition.DAY, PillarPosition.HOUR)


class KakukyokuInputError(ValueError):
    """四柱の入力データが構造的に不正"""


@dataclass(frozen=True)
class HiddenStem:
    """蔵干（天干・十神・重み）"""
    stem: Stem
    ten_god: Optional[TenGod] = None
    weight: Optional[float] = None


@dataclass(frozen=True)
class Pillar:
    """柱（天干・地支と上流で計算済みの十神）"""
    stem: Stem
    branch: Branch
    stem_ten_god: Optional[TenGod] = None
    branch_ten_god: Optional[TenGod] = None
    hidden_stems: Tuple[HiddenStem, ...] = ()

    def __str__(self):
        return f"{self.stem.value}{self.branch.value}"


@dataclass(frozen=True)
class FourPillars:
    """四柱（年・月・日・時）"""
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar

    @property
    def day_master(self) -> Stem:
        return self.day.stem

    def pillar(self, position: PillarPosition) -> Pillar:
        return getattr(self, position.value)

    def items(self) -> Iterator[Tuple[PillarPosition, Pillar]]:
        for position in BRANCH_POSITIONS:
            yield position, self.pillar(position)

    def stem_ten_gods(self) -> Dict[PillarPosition, Optional[TenGod]]:
        """年干・月干・時干の十神"""
        return {position: self.pillar(position).stem_ten_god for position in STEM_POSITIONS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'FourPillars':
        """
        上流サービスの辞書（camelCase / snake_case）から四柱を作成する

        Raises:
            KakukyokuInputError: 柱や必須項目が欠けている、または未知の記号を含む
        """
        from pydantic import ValidationError

        from kakukyoku.schemas import FourPillarsPayload

        try:
            return FourPillarsPayload.model_validate(data).to_domain()
        except ValidationError as e:
            raise KakukyokuInputError(f"四柱データが不正です: {e}") from e

    def __str__(self):
        return ' '.join(str(p) for _, p in self.items())


@dataclass(frozen=True)
class StrengthResult:
    """身強・身弱の判定結果"""
    is_strong: bool
    is_neutral: bool
    is_extreme_strong: bool
    is_extreme_weak: bool
    score: int
    condition_results: Mapping[str, bool] = field(default_factory=dict)
    details: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'condition_results', MappingProxyType(dict(self.condition_results)))
        object.__setattr__(self, 'details', tuple(self.details))

    @property
    def is_weak(self) -> bool:
        return not self.is_strong and not self.is_neutral

    @property
    def strength(self) -> str:
        if self.is_strong:
            return 'strong'
        return 'neutral' if self.is_neutral else 'weak'


@dataclass(frozen=True)
class PatternInfo:
    """格局名と説明"""
    type: str
    description: str


@dataclass(frozen=True)
class KakukyokuResult:
    """格局判定の最終結果"""
    type: str
    category: str
    strength: str
    description: str
    extreme_type: str = ''
    is_extreme_strong: bool = False
    is_extreme_weak: bool = False
    score: int = 0
    details: Tuple[str, ...] = ()

    @property
    def is_special(self) -> bool:
        return self.category == 'special'

    def to_dict(self) -> Dict[str, Any]:
        """プロフィール・運勢サービス向けの辞書"""
        return {
            'type': self.type,
            'category': self.category,
            'strength': self.strength,
            'description': self.description,
            'extremeType': self.extreme_type,
            'isExtremeStrong': self.is_extreme_strong,
            'isExtremeWeak': self.is_extreme_weak,
            'score': self.score,
            'details': list(self.details),
        }
