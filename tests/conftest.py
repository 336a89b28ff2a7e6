#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 共通設定

提供：
- 命式・エンジン・設定の共有 fixtures
- マーカー登録
"""

import os
import sys
from typing import Callable

import pytest

# プロジェクトルートと tests ディレクトリをパスに追加
tests_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(tests_dir)
sys.path.insert(0, project_root)
sys.path.insert(0, tests_dir)

from fixtures.sample_charts import SAMPLE_CHARTS  # noqa: E402

from kakukyoku import FourPillars, KakukyokuConfig, KakukyokuEngine  # noqa: E402


# ==================== 設定・エンジン Fixtures ====================

@pytest.fixture(scope="function")
def config() -> KakukyokuConfig:
    """既定値の設定（グローバル設定に依存しない）"""
    return KakukyokuConfig()


@pytest.fixture(scope="function")
def engine(config) -> KakukyokuEngine:
    """格局判定エンジン"""
    return KakukyokuEngine(config)


# ==================== 命式 Fixtures ====================

@pytest.fixture(scope="session")
def chart_payload() -> Callable[[str], dict]:
    """
    名前から上流形式の命式辞書を返す

    Returns:
        名前 → 辞書 の関数
    """
    def _payload(name: str) -> dict:
        return SAMPLE_CHARTS[name]
    return _payload


@pytest.fixture(scope="session")
def make_chart() -> Callable[[str], FourPillars]:
    """
    名前から四柱モデルを返す

    Returns:
        名前 → FourPillars の関数
    """
    def _make(name: str) -> FourPillars:
        return FourPillars.from_dict(SAMPLE_CHARTS[name])
    return _make


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """マーカー登録"""
    config.addinivalue_line("markers", "unit: 単体テスト")
    config.addinivalue_line("markers", "integration: 結合テスト")


def pytest_collection_modifyitems(config, items):
    """パスからマーカーを自動付与"""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
