from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from loguru import logger

from doc_analytics.application.settings import Settings


@dataclass(frozen=True)
class StopWordSource:
    """Immutable, lowercased stop-word set. Built once at startup."""
    words: frozenset[str]

    @classmethod
    def of(cls, words: Iterable[str]) -> "StopWordSource":
        return cls(words=frozenset(w.strip().lower() for w in words if w and w.strip()))

    @classmethod
    def from_settings(cls, settings: Settings) -> "StopWordSource":
        words = list(settings.stop_words)
        if settings.stop_words_file:
            words.extend(_read_words_file(settings.stop_words_file))
        source = cls.of(words)
        logger.info("Loaded {} stop word(s)", len(source.words))
        return source

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)


def _read_words_file(path: str) -> list[str]:
    # one word per line; blank lines and '#' comments are skipped
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    words = [ln.strip() for ln in lines if ln.strip() and not ln.strip().startswith("#")]
    logger.debug("Read {} stop word(s) from {}", len(words), path)
    return words
