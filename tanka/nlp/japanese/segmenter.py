"""Japanese pattern segmentation (5-7-5-7-7 and friends)."""

from typing import List, Optional, Sequence

from tanka.logger import logger
from tanka.nlp.base import BasePatternSegmenter
from tanka.schema import LineStatus
from .counter import JapaneseMoraCounter


class JapanesePatternSegmenter(BasePatternSegmenter):
    """Split Japanese text into lines whose mora counts follow a pattern."""

    def __init__(self, counter: Optional[JapaneseMoraCounter] = None):
        self.counter = counter or JapaneseMoraCounter()

    def split_by_pattern(self, text: str, pattern: Sequence[int]) -> List[str]:
        segments = super().split_by_pattern(text, pattern)
        logger.debug(f"Split {len(text)} characters into {len(segments)} segments "
                     f"for pattern {list(pattern)}: {segments}")
        return segments

    def score_lines(self, lines: Sequence[str], pattern: Sequence[int]) -> List[LineStatus]:
        """
        Score each pattern slot against its target.

        Only the first ``len(pattern)`` lines are scored; an overflow line has
        no target and gets no status.
        """
        statuses: List[LineStatus] = []
        for line, target in zip(lines, pattern):
            mora = self.counter.count_mora(line)
            if mora == 0:
                statuses.append(LineStatus.empty)
            elif mora == target:
                statuses.append(LineStatus.match)
            else:
                statuses.append(LineStatus.mismatch)
        return statuses

    def _consume(self, text: str, start: int, target: int) -> int:
        if target <= 0:
            return start

        consumed = 0
        end = start
        for _, end, mora in self.counter.iter_units(text, start):
            consumed += mora
            if consumed >= target:
                break
        return end

    def _has_mora(self, text: str) -> bool:
        return any(mora for _, _, mora in self.counter.iter_units(text))
