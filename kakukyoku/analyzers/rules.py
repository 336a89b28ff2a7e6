#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
順序付きルール評価

(条件, 解決関数) の並びを先頭から評価し、最初に成立したルールの結果を返す。
ルールの追加・並べ替えはリストの1行で済む。
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

C = TypeVar('C')
R = TypeVar('R')


@dataclass(frozen=True)
class Rule(Generic[C, R]):
    """格局判定ルール"""
    name: str
    predicate: Callable[[C], bool]
    resolver: Callable[[C], R]


class RuleCascade(Generic[C, R]):
    """先勝ちのルール列"""

    def __init__(self, rules: Sequence[Rule], default: Callable[[C], R]):
        """
        Args:
            rules: 評価順のルール
            default: どのルールも成立しない場合の解決関数
        """
        self.rules: Tuple[Rule, ...] = tuple(rules)
        self.default = default

    def evaluate(self, context: C) -> R:
        result, _ = self.evaluate_with_name(context)
        return result

    def evaluate_with_name(self, context: C) -> Tuple[R, Optional[str]]:
        """結果と成立したルール名（既定値の場合は None）を返す"""
        for rule in self.rules:
            if rule.predicate(context):
                logger.debug(f"ルール成立: {rule.name}")
                return rule.resolver(context), rule.name
        logger.debug("成立ルールなし、既定値を使用")
        return self.default(context), None

    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)
