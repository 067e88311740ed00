import sys
from pathlib import Path
from typing import Callable, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from litclock.domain import ClockTime, QuoteRecord  # noqa: E402


def make_record(
    hour: int,
    minute: int,
    quotation: str = "It was a cold morning.",
    context: str = "cold morning",
    source: str = "Source",
    author: str = "Author",
) -> QuoteRecord:
    return QuoteRecord(ClockTime(hour, minute), context, quotation, source, author)


@pytest.fixture
def record_factory() -> Callable[..., QuoteRecord]:
    return make_record


@pytest.fixture
def sample_records() -> List[QuoteRecord]:
    """A sparse corpus with one shared minute and a record on each side of midnight."""
    return [
        make_record(0, 5, "Five past midnight, and still awake.", "Five past midnight", author="A"),
        make_record(6, 30, "It was half past six already.", "half past six", author="B"),
        make_record(6, 30, "By half past six the house was loud.", "half past six", author="C"),
        make_record(13, 0, "The clocks were striking thirteen.", "striking thirteen", author="D"),
        make_record(23, 58, "Two minutes to midnight, she thought.", "Two minutes to midnight", author="E"),
    ]


@pytest.fixture
def corpus_file(tmp_path: Path) -> Callable[[str], Path]:
    """Writes corpus text to a temporary file and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "corpus.csv"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("litclock.corpus.loader.Halo", _DummyHalo, raising=False)
