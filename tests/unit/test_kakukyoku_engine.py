#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""格局判定エンジンのテスト"""

import pytest

from kakukyoku import (
    KakukyokuConfig,
    KakukyokuEngine,
    PillarPosition,
    TenGod,
    determine_kakukyoku,
)
from kakukyoku.data import tables


class TestDetermine:
    """サンプル命式の判定結果"""

    @pytest.mark.parametrize("name,expected_type,category,strength,extreme_type", [
        ('extreme_strong', '従旺格', 'special', 'strong', '極身強'),
        ('extreme_weak', '従財格', 'special', 'weak', '極身弱'),
        ('normal_weak', '偏財格', 'normal', 'weak', ''),
        ('neutral', '偏財格', 'normal', 'neutral', ''),
        ('kenroku', '建禄格', 'normal', 'weak', ''),
        ('getsujin', '月刃格', 'normal', 'neutral', ''),
        ('year_stem_exposed', '食神格', 'normal', 'neutral', ''),
        ('hour_stem_exposed', '偏財格', 'normal', 'neutral', ''),
        ('no_exposed_stem', '普通格', 'normal', 'strong', ''),
        ('legacy_officer', '従殺格', 'special', 'weak', ''),
        ('legacy_resource', '従強格', 'special', 'strong', ''),
        ('legacy_fallback', '特殊身強格', 'special', 'strong', ''),
    ])
    def test_sample_charts(self, engine, make_chart, name, expected_type, category, strength, extreme_type):
        result = engine.determine(make_chart(name))
        assert result.type == expected_type
        assert result.category == category
        assert result.strength == strength
        assert result.extreme_type == extreme_type
        assert result.description == tables.PATTERN_DESCRIPTIONS[expected_type]

    def test_scores(self, engine, make_chart):
        assert engine.determine(make_chart('extreme_strong')).score == 7
        assert engine.determine(make_chart('extreme_weak')).score == -7
        assert engine.determine(make_chart('legacy_officer')).score == -6
        assert engine.determine(make_chart('legacy_resource')).score == 6

    def test_extreme_flags(self, engine, make_chart):
        result = engine.determine(make_chart('extreme_strong'))
        assert result.is_extreme_strong is True
        assert result.is_extreme_weak is False
        assert result.is_special is True

        result = engine.determine(make_chart('legacy_officer'))
        assert result.is_extreme_strong is False
        assert result.is_extreme_weak is False

    def test_details_end_with_summary(self, engine, make_chart):
        result = engine.determine(make_chart('normal_weak'))
        assert result.details[-2] == '総合スコア: -2'
        assert result.details[-1].startswith('最終判定: ')


class TestInvariants:
    @pytest.mark.parametrize("name", [
        'extreme_strong', 'extreme_weak', 'normal_weak', 'neutral', 'kenroku', 'getsujin',
        'year_stem_exposed', 'hour_stem_exposed', 'no_exposed_stem',
        'legacy_officer', 'legacy_resource', 'legacy_fallback',
    ])
    def test_result_shape(self, engine, make_chart, name):
        result = engine.determine(make_chart(name))
        assert result.category in ('special', 'normal')
        assert result.strength in ('strong', 'neutral', 'weak')
        assert not (result.is_extreme_strong and result.is_extreme_weak)
        if result.category == 'normal':
            assert result.extreme_type == ''
        if result.strength == 'neutral':
            assert result.category == 'normal'

    def test_deterministic(self, engine, make_chart):
        chart = make_chart('extreme_weak')
        assert engine.determine(chart) == engine.determine(chart)

    def test_module_function_matches_engine(self, config, make_chart):
        chart = make_chart('kenroku')
        assert determine_kakukyoku(chart, config=config) == KakukyokuEngine(config).determine(chart)


class TestTenGodOverride:
    def test_explicit_map_changes_month_pattern(self, engine, make_chart):
        chart = make_chart('neutral')
        ten_gods = {PillarPosition.MONTH: TenGod.ZHENGGUAN}
        result = engine.determine(chart, ten_gods)
        assert result.type == '正官格'

    def test_string_keys(self, engine, make_chart):
        chart = make_chart('neutral')
        result = engine.determine(chart, {'month': TenGod.ZHENGGUAN})
        assert result.type == '正官格'

    @pytest.mark.parametrize("empty", ['', '  ', None])
    def test_empty_tag_is_absent(self, engine, make_chart, empty):
        chart = make_chart('neutral')
        result = engine.determine(chart, {'month': empty})
        # 月干の偏財が数えられなくなり、条件C(弱)の減点が消える
        assert result.score == 1
        assert result.strength == 'neutral'
        assert result.type == '普通格'
        assert not any(line.startswith('条件C(極身弱): month干') for line in result.details)


class TestCustomConfig:
    def test_higher_pair_threshold_keeps_chart_normal(self, make_chart):
        engine = KakukyokuEngine(KakukyokuConfig(pair_threshold=0.6))
        result = engine.determine(make_chart('extreme_strong'))
        assert result.category == 'normal'
        assert result.type == '建禄格'
        assert result.extreme_type == ''
        assert result.is_extreme_strong is True

    def test_higher_legacy_threshold(self, make_chart):
        engine = KakukyokuEngine(KakukyokuConfig(legacy_score_threshold=7))
        result = engine.determine(make_chart('legacy_officer'))
        assert result.category == 'normal'


class TestToDict:
    def test_keys(self, engine, make_chart):
        data = engine.determine(make_chart('extreme_strong')).to_dict()
        assert set(data) == {
            'type', 'category', 'strength', 'description', 'extremeType',
            'isExtremeStrong', 'isExtremeWeak', 'score', 'details',
        }
        assert data['extremeType'] == '極身強'
        assert isinstance(data['details'], list)
