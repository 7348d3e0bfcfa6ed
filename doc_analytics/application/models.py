from __future__ import annotations
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Document:
    """A stored text document. The id is assigned by the client."""
    id: int
    text: str


@dataclass(frozen=True)
class DocumentStatistics:
    word_count: int
    unique_word_count: int
    avg_word_length: int
    sentence_count: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


# (word, count) pairs, most frequent first
TopWords = list[tuple[str, int]]
