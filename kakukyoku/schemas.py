#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定の入出力スキーマ

上流（四柱・十神計算）から届く辞書を検証して四柱モデルに変換し、
判定結果を呼び出し側サービス向けの形式に整える。
camelCase（上流の JSON）と snake_case の両方を受け付ける。
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from kakukyoku.data.symbols import Branch, Stem, TenGod
from kakukyoku.models import FourPillars, HiddenStem, KakukyokuResult, Pillar


class HiddenStemPayload(BaseModel):
    """蔵干"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    stem: Stem = Field(..., description="蔵干の天干", examples=["甲"])
    ten_god: Optional[TenGod] = Field(None, validation_alias=AliasChoices('ten_god', 'tenGod'),
                                      description="日干から見た十神", examples=["比肩"])
    weight: Optional[float] = Field(None, ge=0, description="重み（未指定なら既定の重み）", examples=[1.0])

    @field_validator('stem', mode='before')
    @classmethod
    def validate_stem(cls, v):
        return Stem.parse(v)

    @field_validator('ten_god', mode='before')
    @classmethod
    def validate_ten_god(cls, v):
        if v is None or v == '':
            return None
        return TenGod.parse(v)

    def to_domain(self) -> HiddenStem:
        return HiddenStem(stem=self.stem, ten_god=self.ten_god, weight=self.weight)


class PillarPayload(BaseModel):
    """柱"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    stem: Stem = Field(..., description="天干", examples=["甲"])
    branch: Branch = Field(..., description="地支", examples=["寅"])
    stem_ten_god: Optional[TenGod] = Field(None, validation_alias=AliasChoices('stem_ten_god', 'stemTenGod'),
                                           description="天干の十神（日柱は不要）")
    branch_ten_god: Optional[TenGod] = Field(None, validation_alias=AliasChoices('branch_ten_god', 'branchTenGod'),
                                             description="地支の十神")
    hidden_stems: List[HiddenStemPayload] = Field(
        default_factory=list,
        validation_alias=AliasChoices('hidden_stems', 'hiddenStemsTenGods', 'hiddenStems'),
        description="蔵干（天干のみ、または天干・十神・重み）",
    )

    @field_validator('stem', mode='before')
    @classmethod
    def validate_stem(cls, v):
        return Stem.parse(v)

    @field_validator('branch', mode='before')
    @classmethod
    def validate_branch(cls, v):
        return Branch.parse(v)

    @field_validator('stem_ten_god', 'branch_ten_god', mode='before')
    @classmethod
    def validate_ten_god(cls, v):
        if v is None or v == '':
            return None
        return TenGod.parse(v)

    @field_validator('hidden_stems', mode='before')
    @classmethod
    def validate_hidden_stems(cls, v: Any):
        """天干だけの蔵干リストも受け付ける"""
        if v is None:
            return []
        return [{'stem': item} if isinstance(item, (str, Stem)) else item for item in v]

    def to_domain(self) -> Pillar:
        return Pillar(
            stem=self.stem,
            branch=self.branch,
            stem_ten_god=self.stem_ten_god,
            branch_ten_god=self.branch_ten_god,
            hidden_stems=tuple(h.to_domain() for h in self.hidden_stems),
        )


class FourPillarsPayload(BaseModel):
    """四柱"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    year: PillarPayload = Field(..., validation_alias=AliasChoices('year', 'yearPillar'))
    month: PillarPayload = Field(..., validation_alias=AliasChoices('month', 'monthPillar'))
    day: PillarPayload = Field(..., validation_alias=AliasChoices('day', 'dayPillar'))
    hour: PillarPayload = Field(..., validation_alias=AliasChoices('hour', 'hourPillar'))

    def to_domain(self) -> FourPillars:
        return FourPillars(
            year=self.year.to_domain(),
            month=self.month.to_domain(),
            day=self.day.to_domain(),
            hour=self.hour.to_domain(),
        )


class KakukyokuResponse(BaseModel):
    """格局判定結果（プロフィール・運勢サービス向け）"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "type": "建禄格",
                "category": "normal",
                "strength": "strong",
                "description": "独立心が強く負けず嫌いな性格で、人生を切り拓く気質タイプです。",
                "extremeType": "",
                "isExtremeStrong": False,
                "isExtremeWeak": False,
                "score": 3,
                "details": ["条件A(極身強): 得令 - 木は寅月に強まる"],
            }
        },
    )

    type: str = Field(..., description="格局名")
    category: str = Field(..., description="special / normal")
    strength: str = Field(..., description="strong / neutral / weak")
    description: str = Field(..., description="格局の説明")
    extreme_type: str = Field('', alias='extremeType', description="'' / 極身強 / 極身弱")
    is_extreme_strong: bool = Field(False, alias='isExtremeStrong')
    is_extreme_weak: bool = Field(False, alias='isExtremeWeak')
    score: int = Field(0, description="身強弱スコア")
    details: List[str] = Field(default_factory=list, description="判定トレース")

    @classmethod
    def from_result(cls, result: KakukyokuResult) -> 'KakukyokuResponse':
        return cls.model_validate(result.to_dict())
