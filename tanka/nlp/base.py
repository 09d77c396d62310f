from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Sequence, Tuple


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class UnknownRulesetError(ValueError):
    """Raised when a character classification rule set name is not registered."""
    def __init__(self, name: str, known: Iterable[str]):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown classification rule set '{name}': "
            f"expected one of {', '.join(self.known)}"
        )


class BaseMoraCounter(ABC):
    """Abstract base class for mora counting over raw text."""

    @abstractmethod
    def iter_units(self, text: str, start: int = 0) -> Iterator[Tuple[int, int, int]]:
        """
        Walk *text* from *start* and yield ``(begin, end, mora)`` triples.

        Every character of the scanned range belongs to exactly one triple,
        so the triples partition the text. ``mora`` is 0 for excluded
        characters and 1 for everything else.
        """
        pass

    def count_mora(self, text: str) -> int:
        """Count the mora in *text*. Never raises; the empty string has 0 mora."""
        return sum(mora for _, _, mora in self.iter_units(text))

    def split_mora(self, text: str) -> List[str]:
        """Split *text* into its mora units (excluded characters are their own units)."""
        return [text[begin:end] for begin, end, _ in self.iter_units(text)]


class BasePatternSegmenter(ABC):
    """Abstract base class for pattern segmentation using template method pattern."""

    def split_by_pattern(self, text: str, pattern: Sequence[int]) -> List[str]:
        """
        Template method for splitting *text* into one segment per pattern entry.

        The cursor is a character index. Each slot consumes units until its
        target is met or the text runs out; characters left after the last
        slot become one trailing overflow segment. The segments always join
        back into *text*.
        """
        segments: List[str] = []
        cursor = 0

        for target in pattern:
            if cursor >= len(text):
                segments.append("")
                continue

            end = self._consume(text, cursor, target)
            segments.append(text[cursor:end])
            cursor = end

        if cursor < len(text):
            remainder = text[cursor:]
            if segments and not self._has_mora(remainder):
                # Trailing punctuation has no slot of its own
                segments[-1] += remainder
            else:
                segments.append(remainder)

        return segments

    @abstractmethod
    def _consume(self, text: str, start: int, target: int) -> int:
        """
        Advance from *start* until *target* mora are consumed or *text* ends.

        Returns:
            The character index where the segment ends
        """
        pass

    @abstractmethod
    def _has_mora(self, text: str) -> bool:
        """Whether *text* contains at least one mora."""
        pass
