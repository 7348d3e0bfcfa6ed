from __future__ import annotations
from dataclasses import dataclass
from typing import Container, List
import re

# ASCII whitespace only: other separators (e.g. NBSP) are stripped like punctuation
_WS = " \t\n\x0b\f\r"
_NOT_LETTER_OR_WS = re.compile(rf"[^a-zA-Zа-яА-ЯёЁ{_WS}]")
_WS_RUN = re.compile(rf"[{_WS}]+")


def normalize(text: str, stop_words: Container[str] = frozenset()) -> List[str]:
    """
    Turn raw text into analytics tokens:
    - drops everything except ASCII/Cyrillic letters and whitespace (digits included)
    - lowercases
    - splits on whitespace runs
    - removes stop words

    Token order and duplicates are kept.
    """
    cleaned = _NOT_LETTER_OR_WS.sub("", text or "").lower()
    return [tok for tok in _WS_RUN.split(cleaned) if tok and tok not in stop_words]


def normalize_text(text: str, stop_words: Container[str] = frozenset()) -> str:
    return " ".join(normalize(text, stop_words))


@dataclass
class TextNormalizer:
    """normalize()/normalize_text() bound to one stop-word set."""
    stop_words: Container[str] = frozenset()

    def tokens(self, text: str) -> List[str]:
        return normalize(text, self.stop_words)

    def text(self, text: str) -> str:
        return normalize_text(text, self.stop_words)
