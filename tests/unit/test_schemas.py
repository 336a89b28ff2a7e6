#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""入出力スキーマのテスト"""

import copy

import pytest
from pydantic import ValidationError

from kakukyoku import Branch, FourPillars, KakukyokuInputError, Stem, TenGod
from kakukyoku.schemas import FourPillarsPayload, HiddenStemPayload, KakukyokuResponse, PillarPayload


class TestPillarPayload:
    def test_camel_case(self):
        payload = PillarPayload.model_validate({
            'stem': '甲', 'branch': '寅', 'stemTenGod': '比肩', 'branchTenGod': '比肩',
            'hiddenStemsTenGods': [{'stem': '丙', 'tenGod': '食神', 'weight': 0.5}],
        })
        pillar = payload.to_domain()
        assert pillar.stem is Stem.JIA
        assert pillar.branch is Branch.YIN
        assert pillar.stem_ten_god is TenGod.BIJIAN
        assert pillar.hidden_stems[0].ten_god is TenGod.SHISHEN
        assert pillar.hidden_stems[0].weight == 0.5

    def test_snake_case(self):
        payload = PillarPayload.model_validate({
            'stem': '庚', 'branch': '申', 'stem_ten_god': '偏官', 'branch_ten_god': '偏官',
        })
        assert payload.to_domain().branch_ten_god is TenGod.PIANGUAN

    def test_plain_hidden_stems(self):
        payload = PillarPayload.model_validate({'stem': '庚', 'branch': '午', 'hiddenStems': ['丁', '己']})
        hidden = payload.to_domain().hidden_stems
        assert [h.stem for h in hidden] == [Stem.DING, Stem.JI]
        assert all(h.ten_god is None for h in hidden)

    def test_chinese_alias(self):
        payload = PillarPayload.model_validate({'stem': '庚', 'branch': '申', 'stemTenGod': '七杀'})
        assert payload.stem_ten_god is TenGod.PIANGUAN

    def test_empty_ten_god_is_none(self):
        payload = PillarPayload.model_validate({'stem': '甲', 'branch': '子', 'stemTenGod': ''})
        assert payload.stem_ten_god is None

    @pytest.mark.parametrize("data", [
        {'stem': 'X', 'branch': '子'},
        {'stem': '甲', 'branch': '甲'},
        {'stem': '甲', 'branch': '子', 'stemTenGod': '不明'},
    ])
    def test_invalid_symbols(self, data):
        with pytest.raises(ValidationError):
            PillarPayload.model_validate(data)

    def test_negative_weight(self):
        with pytest.raises(ValidationError):
            HiddenStemPayload.model_validate({'stem': '甲', 'weight': -1})


class TestFourPillars:
    def test_from_dict(self, chart_payload):
        four_pillars = FourPillars.from_dict(chart_payload('kenroku'))
        assert four_pillars.day_master is Stem.JIA
        assert four_pillars.month.branch is Branch.YIN
        assert len(four_pillars.month.hidden_stems) == 3

    def test_payload_to_domain(self, chart_payload):
        four_pillars = FourPillarsPayload.model_validate(chart_payload('neutral')).to_domain()
        assert four_pillars == FourPillars.from_dict(chart_payload('neutral'))

    def test_missing_pillar(self, chart_payload):
        data = copy.deepcopy(chart_payload('neutral'))
        del data['hourPillar']
        with pytest.raises(KakukyokuInputError):
            FourPillars.from_dict(data)

    def test_input_error_is_value_error(self, chart_payload):
        data = copy.deepcopy(chart_payload('neutral'))
        data['dayPillar']['stem'] = '?'
        with pytest.raises(ValueError):
            FourPillars.from_dict(data)


class TestKakukyokuResponse:
    def test_from_result(self, engine, make_chart):
        result = engine.determine(make_chart('extreme_weak'))
        response = KakukyokuResponse.from_result(result)
        assert response.type == '従財格'
        assert response.extreme_type == '極身弱'
        assert response.is_extreme_weak is True

        dumped = response.model_dump(by_alias=True)
        assert dumped['extremeType'] == '極身弱'
        assert dumped['isExtremeWeak'] is True
        assert dumped['details'] == list(result.details)
