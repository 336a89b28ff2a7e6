#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
格局判定用の静的テーブル

- 地支が持つ五行
- 五行が強まる月（得令）・弱まる月（失令）
- 建禄格・月刃格となる日干と月支の組み合わせ
- 十神の分類と格局名・説明文
"""

from typing import Dict, FrozenSet, Tuple

from .symbols import Branch, Element, Stem, TenGod

# 地支が持つ五行（簡易版、主気が先頭）
BRANCH_ELEMENTS: Dict[Branch, Tuple[Element, ...]] = {
    Branch.ZI: (Element.WATER,),
    Branch.CHOU: (Element.EARTH, Element.WATER, Element.METAL),
    Branch.YIN: (Element.WOOD, Element.FIRE, Element.EARTH),
    Branch.MAO: (Element.WOOD,),
    Branch.CHEN: (Element.EARTH, Element.WOOD, Element.WATER),
    Branch.SI: (Element.FIRE, Element.EARTH, Element.METAL),
    Branch.WU: (Element.FIRE, Element.EARTH),
    Branch.WEI: (Element.EARTH, Element.FIRE, Element.WOOD),
    Branch.SHEN: (Element.METAL, Element.WATER, Element.EARTH),
    Branch.YOU: (Element.METAL,),
    Branch.XU: (Element.EARTH, Element.FIRE, Element.METAL),
    Branch.HAI: (Element.WATER, Element.WOOD),
}

# 当旺・次旺となる月支
STRONG_MONTHS: Dict[Element, FrozenSet[Branch]] = {
    Element.WOOD: frozenset({Branch.YIN, Branch.MAO, Branch.CHEN}),
    Element.FIRE: frozenset({Branch.SI, Branch.WU, Branch.WEI}),
    Element.EARTH: frozenset({Branch.CHEN, Branch.WEI, Branch.XU, Branch.CHOU}),
    Element.METAL: frozenset({Branch.SHEN, Branch.YOU, Branch.XU}),
    Element.WATER: frozenset({Branch.HAI, Branch.ZI, Branch.CHOU}),
}

# 休・囚となる月支
WEAK_MONTHS: Dict[Element, FrozenSet[Branch]] = {
    Element.WOOD: frozenset({Branch.SHEN, Branch.YOU, Branch.XU}),
    Element.FIRE: frozenset({Branch.HAI, Branch.ZI, Branch.CHOU}),
    Element.EARTH: frozenset({Branch.YIN, Branch.MAO, Branch.SHEN, Branch.YOU}),
    Element.METAL: frozenset({Branch.SI, Branch.WU, Branch.WEI}),
    Element.WATER: frozenset({Branch.CHEN, Branch.SI, Branch.WU, Branch.WEI}),
}

# 建禄格：日干 → 月支
KENROKU_COMBINATIONS: Dict[Stem, Branch] = {
    Stem.JIA: Branch.YIN,
    Stem.YI: Branch.MAO,
    Stem.BING: Branch.SI,
    Stem.DING: Branch.WU,
    Stem.WU: Branch.CHEN,
    Stem.JI: Branch.WEI,
    Stem.GENG: Branch.SHEN,
    Stem.XIN: Branch.YOU,
    Stem.REN: Branch.HAI,
    Stem.GUI: Branch.ZI,
}

# 月刃格：日干 → 月支
GETSUJIN_COMBINATIONS: Dict[Stem, Branch] = {
    Stem.JIA: Branch.MAO,
    Stem.YI: Branch.YIN,
    Stem.BING: Branch.WU,
    Stem.DING: Branch.SI,
    Stem.WU: Branch.WEI,
    Stem.JI: Branch.CHEN,
    Stem.GENG: Branch.YOU,
    Stem.XIN: Branch.SHEN,
    Stem.REN: Branch.ZI,
    Stem.GUI: Branch.HAI,
}

# 日干を強める／弱める十神（天干の判定用）
STRENGTHENING_TEN_GODS: FrozenSet[TenGod] = frozenset({
    TenGod.BIJIAN, TenGod.JIECAI, TenGod.PIANYIN, TenGod.ZHENGYIN,
})
WEAKENING_TEN_GODS: FrozenSet[TenGod] = frozenset({
    TenGod.PIANGUAN, TenGod.ZHENGGUAN, TenGod.PIANCAI,
    TenGod.ZHENGCAI, TenGod.SHISHEN, TenGod.SHANGGUAN,
})

# 十神ペア（特別格局の閾値判定用）
COMPANION_PAIR: Tuple[TenGod, TenGod] = (TenGod.BIJIAN, TenGod.JIECAI)
RESOURCE_PAIR: Tuple[TenGod, TenGod] = (TenGod.PIANYIN, TenGod.ZHENGYIN)
OUTPUT_PAIR: Tuple[TenGod, TenGod] = (TenGod.SHISHEN, TenGod.SHANGGUAN)
WEALTH_PAIR: Tuple[TenGod, TenGod] = (TenGod.PIANCAI, TenGod.ZHENGCAI)
OFFICER_PAIR: Tuple[TenGod, TenGod] = (TenGod.PIANGUAN, TenGod.ZHENGGUAN)

TEN_GOD_PAIRS: Tuple[Tuple[TenGod, TenGod], ...] = (
    COMPANION_PAIR, OUTPUT_PAIR, WEALTH_PAIR, OFFICER_PAIR, RESOURCE_PAIR,
)

# 従勢格の対象となる6種類
MOMENTUM_TEN_GODS: Tuple[TenGod, ...] = OUTPUT_PAIR + WEALTH_PAIR + OFFICER_PAIR

# 格局名
JUUOU = '従旺格'
JUUKYOU = '従強格'
JUUJI = '従児格'
JUUZAI = '従財格'
JUUSATSU = '従殺格'
JUUSEI = '従勢格'
SPECIAL_STRONG_FALLBACK = '特殊身強格'
SPECIAL_WEAK_FALLBACK = '特殊身弱格'
KENROKU = '建禄格'
GETSUJIN = '月刃格'
FUTSUU = '普通格'

# 通変星 → 普通格局名
TEN_GOD_PATTERNS: Dict[TenGod, str] = {
    TenGod.BIJIAN: '比肩格',
    TenGod.JIECAI: '劫財格',
    TenGod.SHISHEN: '食神格',
    TenGod.SHANGGUAN: '傷官格',
    TenGod.PIANCAI: '偏財格',
    TenGod.ZHENGCAI: '正財格',
    TenGod.PIANGUAN: '偏官格',
    TenGod.ZHENGGUAN: '正官格',
    TenGod.PIANYIN: '偏印格',
    TenGod.ZHENGYIN: '印緑格',
}

SPECIAL_FALLBACK_DESCRIPTION = (
    '特別な気質タイプで、通常とは異なる特性を持っています。'
    '詳細な鑑定は個別に行うことをお勧めします。'
)

# 格局名 → 説明文
PATTERN_DESCRIPTIONS: Dict[str, str] = {
    JUUOU: '主体性があり、自分の思った通りに人生を突き進む気質タイプです。'
           '自己主張が強く、リーダーシップがある一方、協調性を意識する必要があります。',
    JUUKYOU: '独自の人生観を持ち、学識の充実した人生を歩む気質タイプです。'
             '知性と洞察力に優れ、精神的な豊かさを重視します。',
    JUUJI: '社交的で頭の回転が速く、鋭い感性と人生観を持つ気質タイプです。'
           '創造性に富み、アイデアが豊富ですが、持続性を意識すると良いでしょう。',
    JUUZAI: 'とても強い財運を持ち、人間関係にも恵まれる気質タイプです。'
            '実利的で物質的な豊かさを得やすい一方、精神的な充実も大切にしましょう。',
    JUUSATSU: '忍耐強く封建的な世界を好み、目上につき従う気質タイプです。'
              '規律と秩序を重んじ、責任感が強い特徴があります。',
    JUUSEI: '円満な性格で、環境や状況に柔軟に対応していく気質タイプです。'
            'バランス感覚に優れ、多方面での活躍が期待できます。',
    SPECIAL_STRONG_FALLBACK: SPECIAL_FALLBACK_DESCRIPTION,
    SPECIAL_WEAK_FALLBACK: SPECIAL_FALLBACK_DESCRIPTION,
    KENROKU: '独立心が強く負けず嫌いな性格で、人生を切り拓く気質タイプです。'
             '目標に向かって邁進する力強さがあります。',
    GETSUJIN: 'プライドが高く、自分の世界や価値観を重視する気質タイプです。'
              '独自の判断基準を持ち、自律性が高い特徴があります。',
    '比肩格': '同じ立場の人と協力し合い、対等な関係を構築する気質タイプです。'
             '協調性がありながらも自立心があります。',
    '劫財格': '自立心が強く、競争心のある気質タイプです。'
             '目標達成のために努力を惜しまず、向上心が旺盛です。',
    '食神格': '鋭い感覚を持ち快楽主義者で、のびのびと生きる気質タイプです。'
             '芸術や創作活動に才能を発揮することが多いでしょう。',
    '傷官格': '独自の感性の持ち主で、専門技術の習得にも長ける気質タイプです。'
             '個性的な発想と表現力に優れています。',
    '偏財格': '社交的で義理人情に厚く、物質生活を重んじる気質タイプです。'
             '人付き合いが広く、実利を重視する傾向があります。',
    '正財格': '現実的な合理主義者で、堅実な価値判断をする気質タイプです。'
             '経済観念に優れ、計画的な行動が得意です。',
    '偏官格': '正義感にあふれ、強い者を抑えて弱い者を助ける気質タイプです。'
             '社会的なルールや公正さを重んじます。',
    '正官格': 'まじめで大言を表に出さず、家に規律や礼儀を重んじる気質タイプです。'
             '責任感が強く、信頼される人格者です。',
    '偏印格': '知的好奇心が旺盛で、内面世界の探求を重視する気質タイプです。'
             '学問や思索に深い関心を持ちます。',
    '印緑格': '好奇心旺盛で探究心が強く、知識を吸収することに喜びを感じる気質タイプです。'
             '教養が豊かで知的な魅力があります。',
    FUTSUU: '調和のとれた一般的な気質タイプです。'
            '適応力があり、状況に応じた柔軟な対応ができます。',
}

EXTREME_STRONG_LABEL = '極身強'
EXTREME_WEAK_LABEL = '極身弱'
STRENGTH_LABELS: Dict[str, str] = {
    'strong': '身強',
    'weak': '身弱',
    'neutral': '中和',
}
