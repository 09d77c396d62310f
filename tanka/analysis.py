"""
Tanka analysis entry points.

``count_mora`` and ``split_by_pattern`` are the two core operations; both are
pure and never raise for any string. ``analyze`` combines them into the
immutable view state a front end renders (lines, per-line status and the
advisory shown when the total is far from 31).
"""

from functools import lru_cache
from typing import List, Optional, Sequence

from tanka import TANKA_PATTERN, LINE_DELIMITER
from tanka.config import get_ruleset_name, get_warning_threshold
from tanka.logger import logger
from tanka.nlp import get_mora_counter, get_pattern_segmenter
from tanka.schema import TankaAnalysis, TankaLine

EXAMPLE_POEM = "たんぽぽのわたげがとんだはるのそらまいあがるようにこどものこえ"

WARNING_TEMPLATE = "入力された音の数({total})が短歌の標準的な音数({expected})と大きく異なります。"


@lru_cache(maxsize=None)
def _counter(ruleset: str):
    return get_mora_counter(ruleset)


@lru_cache(maxsize=None)
def _segmenter(ruleset: str):
    return get_pattern_segmenter(ruleset)


def _resolve_ruleset(ruleset: Optional[str]) -> str:
    return (ruleset or get_ruleset_name()).lower()


def count_mora(text: str, ruleset: Optional[str] = None) -> int:
    """Count the mora in *text* (0 for the empty string)."""
    return _counter(_resolve_ruleset(ruleset)).count_mora(text)


def split_by_pattern(text: str, pattern: Sequence[int] = TANKA_PATTERN,
                     ruleset: Optional[str] = None) -> List[str]:
    """Split *text* into one segment per pattern entry, plus an overflow segment if needed."""
    return _segmenter(_resolve_ruleset(ruleset)).split_by_pattern(text, pattern)


def format_line(line: str) -> str:
    """Render a line the way the counter displays it, with a trailing ／."""
    return f"{line}{LINE_DELIMITER}"


def build_warning(total: int, expected: int, threshold: int) -> Optional[str]:
    """Return the advisory for a total far from *expected*, or None."""
    if abs(total - expected) > threshold:
        return WARNING_TEMPLATE.format(total=total, expected=expected)
    return None


def analyze(text: str, pattern: Sequence[int] = TANKA_PATTERN,
            ruleset: Optional[str] = None,
            warning_threshold: Optional[int] = None) -> TankaAnalysis:
    """
    Recompute the full view state for *text*.

    Args:
        text: Raw user input
        pattern: Target mora per line (defaults to 5-7-5-7-7)
        ruleset: Classification rule set name (defaults to TANKA_RULESET)
        warning_threshold: Allowed distance from the pattern total before the
            advisory is set (defaults to TANKA_WARNING_THRESHOLD)

    Returns:
        Immutable TankaAnalysis; empty (no lines) for blank input

    Raises:
        UnknownRulesetError: If the rule set name is not registered
        ConfigError: If no threshold is given and TANKA_WARNING_THRESHOLD is unusable
    """
    ruleset = _resolve_ruleset(ruleset)
    if warning_threshold is None:
        warning_threshold = get_warning_threshold()
    expected = sum(pattern)

    if not text or text.strip() == "":
        return TankaAnalysis(text=text, ruleset=ruleset, total_mora=0, expected_total=expected)

    counter = _counter(ruleset)
    segmenter = _segmenter(ruleset)

    total = counter.count_mora(text)
    segments = segmenter.split_by_pattern(text, pattern)
    statuses = segmenter.score_lines(segments, pattern)

    lines: List[TankaLine] = []
    for index, segment in enumerate(segments):
        scored = index < len(pattern)
        lines.append(TankaLine(
            index=index,
            text=segment,
            display=format_line(segment),
            mora=counter.count_mora(segment),
            target=pattern[index] if scored else None,
            status=statuses[index] if scored else None,
        ))

    warning = build_warning(total, expected, warning_threshold)
    logger.debug(f"Analyzed {total} mora into {len(lines)} lines (ruleset={ruleset})")

    return TankaAnalysis(
        text=text,
        ruleset=ruleset,
        total_mora=total,
        expected_total=expected,
        lines=lines,
        warning=warning,
    )
