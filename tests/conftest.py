"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tanka.analysis import EXAMPLE_POEM


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep TANKA_* variables from the developer's shell out of the tests."""
    for name in ("TANKA_RULESET", "TANKA_WARNING_THRESHOLD", "TANKA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # A developer .env file must not leak into CLI runs
    monkeypatch.setattr("tanka.cli.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def example_poem():
    """The example poem shown by the counter (31 mora)."""
    return EXAMPLE_POEM


@pytest.fixture
def sample_texts():
    """Assorted inputs used for the partition properties."""
    return [
        "",
        "あ",
        "きょう",
        "「こんにちは」",
        "  はる の そら  ",
        "ゃゃゃ",
        "っー",
        "がっこうへいく、ラーメンをたべる。",
        EXAMPLE_POEM,
        EXAMPLE_POEM + "。",
        EXAMPLE_POEM + "あいう",
        "「" + EXAMPLE_POEM + "」きょうもまた",
    ]
