"""Tanka mora counter: count mora and split poems into 5-7-5-7-7 lines."""

# Canonical tanka structure: 5-7-5-7-7 mora, 31 in total
TANKA_PATTERN = (5, 7, 5, 7, 7)
EXPECTED_TOTAL = sum(TANKA_PATTERN)

# Delimiter appended to every rendered line
LINE_DELIMITER = "／"

from tanka.analysis import analyze, count_mora, split_by_pattern  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    'TANKA_PATTERN',
    'EXPECTED_TOTAL',
    'LINE_DELIMITER',
    'analyze',
    'count_mora',
    'split_by_pattern',
]
