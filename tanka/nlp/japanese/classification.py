"""
Character classification tables for mora counting.

Every character falls in exactly one CharacterClass. Which characters sit in
which class is policy, so the policies live here as named, immutable rule
sets and the scanning code only ever asks ``table.classify(char)``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

import jaconv

from tanka.nlp.base import UnknownRulesetError


class CharacterClass(str, Enum):
    excluded = "excluded"                    # never counted
    combining_small_kana = "combining"       # merges into the preceding mora
    independent_unit = "independent"         # っ / ー counted on their own
    ordinary = "ordinary"                    # one mora


def _with_katakana(hiragana: str) -> FrozenSet[str]:
    """Return the hiragana characters together with their katakana forms."""
    return frozenset(hiragana) | frozenset(jaconv.hira2kata(hiragana))


# ──────────────────────────────────────────────────────────────────────────────
# CHARACTER SETS
# ──────────────────────────────────────────────────────────────────────────────
SMALL_KANA = _with_katakana("ぁぃぅぇぉゃゅょゎ")
SOKUON = _with_katakana("っ")
LONG_VOWEL_MARK = frozenset("ー")

# Brackets and quotation marks (Japanese and ASCII)
BRACKETS = frozenset("「」『』（）()［］[]｛｝{}【】〔〕〈〉《》〘〙〚〛\"'“”‘’＂＇〝〟")
# Sentence and clause punctuation
PUNCTUATION = frozenset("、。，．,.・：；:;？！?!／/")
# Ellipses, tildes and wave dashes
ELONGATION_MARKS = frozenset("…‥〜～~")


@dataclass(frozen=True)
class ClassificationTable:
    """Set-membership table mapping a single character to its CharacterClass."""
    name: str
    combining: FrozenSet[str]
    independent: FrozenSet[str]
    excluded: FrozenSet[str]
    exclude_whitespace: bool = True

    def classify(self, char: str) -> CharacterClass:
        if char in self.excluded or (self.exclude_whitespace and char.isspace()):
            return CharacterClass.excluded
        if char in self.combining:
            return CharacterClass.combining_small_kana
        if char in self.independent:
            return CharacterClass.independent_unit
        return CharacterClass.ordinary

    def is_excluded(self, char: str) -> bool:
        return self.classify(char) is CharacterClass.excluded

    def is_combining(self, char: str) -> bool:
        return self.classify(char) is CharacterClass.combining_small_kana


# Small tsu and the long-vowel mark are mora of their own (classical counting).
STANDARD_RULESET = ClassificationTable(
    name="standard",
    combining=SMALL_KANA,
    independent=SOKUON | LONG_VOWEL_MARK,
    excluded=BRACKETS | PUNCTUATION,
)

# Same as standard, but ellipses and tildes are not counted either.
EXTENDED_RULESET = ClassificationTable(
    name="extended",
    combining=SMALL_KANA,
    independent=SOKUON | LONG_VOWEL_MARK,
    excluded=BRACKETS | PUNCTUATION | ELONGATION_MARKS,
)

# Early counter behaviour: small tsu and ー fold into the preceding mora.
LEGACY_RULESET = ClassificationTable(
    name="legacy",
    combining=SMALL_KANA | SOKUON | LONG_VOWEL_MARK,
    independent=frozenset(),
    excluded=BRACKETS | PUNCTUATION,
)

RULESETS: Dict[str, ClassificationTable] = {
    table.name: table
    for table in (STANDARD_RULESET, EXTENDED_RULESET, LEGACY_RULESET)
}


def get_ruleset(name: str) -> ClassificationTable:
    """Look up a rule set by name.

    Raises:
        UnknownRulesetError: If *name* is not registered
    """
    try:
        return RULESETS[name.lower()]
    except KeyError:
        raise UnknownRulesetError(name, RULESETS.keys())
