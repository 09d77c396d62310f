"""Kana readings for text that contains kanji."""

import re
from typing import List

import jaconv
from janome.tokenizer import Tokenizer

from tanka.logger import logger


class JapaneseReadingConverter:
    """Rewrite mixed kanji/kana text as hiragana so it can be mora-counted."""

    def __init__(self):
        """Initialize the converter with a Janome tokenizer."""
        self._tokenizer = Tokenizer()
        self._kanji_re = re.compile(r"[㐀-䶿一-鿿々〆ヵヶ]")

    def has_kanji(self, text: str) -> bool:
        """Check if *text* contains at least one kanji."""
        return bool(self._kanji_re.search(text))

    def to_readings(self, text: str) -> List[str]:
        """Return the hiragana reading of every token in *text*.

        Symbols and tokens Janome has no reading for are kept as written, so
        punctuation still reaches the counter and is excluded there.
        """
        readings: List[str] = []
        for token in self._tokenizer.tokenize(text, wakati=False):
            surface = token.surface
            if token.part_of_speech.startswith("記号") or token.reading == "*":
                readings.append(surface)
                continue
            readings.append(jaconv.kata2hira(token.reading))
        return readings

    def to_hiragana(self, text: str) -> str:
        """Return *text* rewritten as its hiragana reading."""
        if not self.has_kanji(text):
            # Kana-only input already carries its reading
            return text

        reading = "".join(self.to_readings(text))
        logger.debug(f"Reading for '{text}': '{reading}'")
        return reading
