from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence
import re

from doc_analytics.application.errors import NoDocumentsInCorpus
from doc_analytics.application.models import Document, DocumentStatistics, TopWords
from doc_analytics.application.services.normalizer import TextNormalizer

TOP_LIMIT = 10

_SENTENCE_END = re.compile(r"[.!?]+")


def _most_frequent(items: Iterable[str], limit: int) -> TopWords:
    # Counter keeps first-seen order and most_common() is stable on ties
    if limit <= 0:
        return []
    return Counter(items).most_common(limit)


def count_sentences(text: str) -> int:
    """Sentences are counted on the raw text, not the normalized one."""
    return sum(1 for part in _SENTENCE_END.split(text or "") if part.strip())


@dataclass
class TextAnalytics:
    normalizer: TextNormalizer = field(default_factory=TextNormalizer)

    def statistics(self, text: str) -> DocumentStatistics:
        words = self.normalizer.tokens(text)
        word_count = len(words)
        # a text made only of stop words / punctuation has no words to average
        avg = sum(len(w) for w in words) // word_count if word_count else 0
        return DocumentStatistics(
            word_count=word_count,
            unique_word_count=len(set(words)),
            avg_word_length=avg,
            sentence_count=count_sentences(text),
        )

    def aggregate_statistics(self, documents: Sequence[Document]) -> dict[str, int]:
        if not documents:
            raise NoDocumentsInCorpus()
        corpus = " ".join(doc.text for doc in documents)
        return {"documents_count": len(documents), **self.statistics(corpus).as_dict()}

    def top_words(self, text: str, limit: int = TOP_LIMIT) -> TopWords:
        return _most_frequent(self.normalizer.tokens(text), limit)

    def bigrams(self, text: str, limit: int = TOP_LIMIT) -> TopWords:
        """Most frequent adjacent token pairs, rendered as 'first second'."""
        words = self.normalizer.tokens(text)
        pairs = (f"{a} {b}" for a, b in zip(words, words[1:]))
        return _most_frequent(pairs, limit)

    def search_by_word(self, documents: Sequence[Document], word: str) -> List[int]:
        if not documents:
            raise NoDocumentsInCorpus()
        needle = word.lower()
        return [doc.id for doc in documents if needle in self.normalizer.tokens(doc.text)]
