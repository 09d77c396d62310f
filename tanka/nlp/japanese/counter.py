"""Japanese mora counting."""

from typing import Iterator, Optional, Tuple

from tanka.nlp.base import BaseMoraCounter
from .classification import ClassificationTable, STANDARD_RULESET


class JapaneseMoraCounter(BaseMoraCounter):
    """Mora counter driven by a character ClassificationTable."""

    def __init__(self, table: Optional[ClassificationTable] = None):
        self.table = table or STANDARD_RULESET

    def iter_units(self, text: str, start: int = 0) -> Iterator[Tuple[int, int, int]]:
        """
        Scan *text* left to right, looking one character ahead.

        - Excluded characters form a zero-mora unit of their own.
        - A character followed by a combining small kana forms one mora
          together with it (きょ, シャ).
        - Anything else is one mora, including a combining small kana with
          no usable base in front of it (start of text, after punctuation).
        """
        length = len(text)
        pos = start

        while pos < length:
            if self.table.is_excluded(text[pos]):
                yield pos, pos + 1, 0
                pos += 1
            elif pos + 1 < length and self.table.is_combining(text[pos + 1]):
                yield pos, pos + 2, 1
                pos += 2
            else:
                yield pos, pos + 1, 1
                pos += 1
