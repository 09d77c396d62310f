"""Natural Language Processing module for tanka

This module provides the mora counting and pattern segmentation used to
analyze tanka, parameterised by a character classification rule set.
"""

from .base import BaseMoraCounter, BasePatternSegmenter, UnknownRulesetError

def get_mora_counter(ruleset: str = "standard") -> BaseMoraCounter:
    """Get a mora counter for the given classification rule set.

    Args:
        ruleset: Rule set name ('standard', 'extended' or 'legacy')

    Returns:
        Mora counter bound to that rule set

    Raises:
        UnknownRulesetError: If the rule set is not registered
    """
    from .japanese import JapaneseMoraCounter, get_ruleset
    return JapaneseMoraCounter(get_ruleset(ruleset))

def get_pattern_segmenter(ruleset: str = "standard") -> BasePatternSegmenter:
    """Get a pattern segmenter for the given classification rule set.

    Args:
        ruleset: Rule set name ('standard', 'extended' or 'legacy')

    Returns:
        Pattern segmenter whose counter is bound to that rule set

    Raises:
        UnknownRulesetError: If the rule set is not registered
    """
    from .japanese import JapanesePatternSegmenter, JapaneseMoraCounter, get_ruleset
    return JapanesePatternSegmenter(JapaneseMoraCounter(get_ruleset(ruleset)))

def get_reading_converter():
    """Get a converter that rewrites kanji text as its hiragana reading."""
    from .japanese import JapaneseReadingConverter
    return JapaneseReadingConverter()

__all__ = [
    'BaseMoraCounter',
    'BasePatternSegmenter',
    'UnknownRulesetError',
    'get_mora_counter',
    'get_pattern_segmenter',
    'get_reading_converter',
]
