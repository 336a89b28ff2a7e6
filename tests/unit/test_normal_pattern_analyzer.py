#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""普通格局判定の単体テスト"""

import pytest

from kakukyoku import NormalPatternAnalyzer, PillarPosition, Stem, Branch, TenGod
from kakukyoku.analyzers.normal_pattern_analyzer import (
    NORMAL_RULES,
    is_getsujin_combination,
    is_kenroku_combination,
    month_branch_depth_pattern,
    ten_god_pattern,
)
from kakukyoku.data import tables


@pytest.fixture
def analyzer(config):
    return NormalPatternAnalyzer(config)


class TestCombinations:
    @pytest.mark.parametrize("stem,branch", [
        ('甲', '寅'), ('乙', '卯'), ('丙', '巳'), ('丁', '午'), ('戊', '辰'),
        ('己', '未'), ('庚', '申'), ('辛', '酉'), ('壬', '亥'), ('癸', '子'),
    ])
    def test_kenroku(self, stem, branch):
        assert is_kenroku_combination(Stem(stem), Branch(branch))

    @pytest.mark.parametrize("stem,branch", [
        ('甲', '卯'), ('乙', '寅'), ('丙', '午'), ('丁', '巳'), ('戊', '未'),
        ('己', '辰'), ('庚', '酉'), ('辛', '申'), ('壬', '子'), ('癸', '亥'),
    ])
    def test_getsujin(self, stem, branch):
        assert is_getsujin_combination(Stem(stem), Branch(branch))
        assert not is_kenroku_combination(Stem(stem), Branch(branch))


class TestCascade:
    @pytest.mark.parametrize("name,expected", [
        ('kenroku', '建禄格'),
        ('getsujin', '月刃格'),
        ('normal_weak', '偏財格'),
        ('year_stem_exposed', '食神格'),
        ('hour_stem_exposed', '偏財格'),
        ('no_exposed_stem', '普通格'),
    ])
    def test_first_match_wins(self, analyzer, make_chart, name, expected):
        info = analyzer.classify(make_chart(name))
        assert info.type == expected
        assert info.description == tables.PATTERN_DESCRIPTIONS[expected]

    def test_kenroku_before_month_stem(self, analyzer, make_chart):
        # 寅の蔵干に丙があり月干丙とも一致するが、建禄格が先に成立する
        chart = make_chart('kenroku')
        assert chart.month.stem is Stem.BING
        assert analyzer.classify(chart).type == '建禄格'

    def test_month_stem_uses_explicit_ten_god(self, analyzer, make_chart):
        chart = make_chart('normal_weak')
        stem_ten_gods = chart.stem_ten_gods()
        stem_ten_gods[PillarPosition.MONTH] = TenGod.ZHENGGUAN
        assert analyzer.classify(chart, stem_ten_gods).type == '正官格'

    def test_missing_ten_god_gives_futsuu(self, analyzer, make_chart):
        chart = make_chart('normal_weak')
        stem_ten_gods = chart.stem_ten_gods()
        stem_ten_gods[PillarPosition.MONTH] = None
        assert analyzer.classify(chart, stem_ten_gods).type == '普通格'

    def test_rule_order(self):
        assert [r.name for r in NORMAL_RULES] == [
            'kenroku', 'getsujin',
            'month_stem_in_month_hidden', 'year_stem_in_month_hidden', 'hour_stem_in_month_hidden',
        ]


class TestTenGodPatterns:
    @pytest.mark.parametrize("ten_god,expected", [
        (TenGod.BIJIAN, '比肩格'),
        (TenGod.JIECAI, '劫財格'),
        (TenGod.SHISHEN, '食神格'),
        (TenGod.SHANGGUAN, '傷官格'),
        (TenGod.PIANCAI, '偏財格'),
        (TenGod.ZHENGCAI, '正財格'),
        (TenGod.PIANGUAN, '偏官格'),
        (TenGod.ZHENGGUAN, '正官格'),
        (TenGod.PIANYIN, '偏印格'),
        (TenGod.ZHENGYIN, '印緑格'),
        (None, '普通格'),
    ])
    def test_mapping(self, ten_god, expected):
        assert ten_god_pattern(ten_god).type == expected


class TestDepthFallback:
    @pytest.mark.parametrize("branch", list(Branch))
    def test_always_futsuu(self, branch):
        for stem in Stem:
            assert month_branch_depth_pattern(branch, stem).type == '普通格'
