"""Japanese mora counting and tanka segmentation module."""

from .classification import (
    CharacterClass,
    ClassificationTable,
    RULESETS,
    STANDARD_RULESET,
    EXTENDED_RULESET,
    LEGACY_RULESET,
    get_ruleset,
)
from .counter import JapaneseMoraCounter
from .segmenter import JapanesePatternSegmenter
from .reading import JapaneseReadingConverter

__all__ = [
    'CharacterClass',
    'ClassificationTable',
    'RULESETS',
    'STANDARD_RULESET',
    'EXTENDED_RULESET',
    'LEGACY_RULESET',
    'get_ruleset',
    'JapaneseMoraCounter',
    'JapanesePatternSegmenter',
    'JapaneseReadingConverter',
]
