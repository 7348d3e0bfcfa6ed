from __future__ import annotations
from typing import Dict, List, Optional

from loguru import logger

from doc_analytics.application.models import Document


class InMemoryDocumentStore:
    """Stores documents in a dict keyed by id. Not persistent; fine for dev and tests."""

    def __init__(self):
        # id -> text, in first-insert order
        self._docs: Dict[int, str] = {}

    def upsert(self, document: Document) -> None:
        # same id overwrites the text (last write wins)
        self._docs[document.id] = document.text
        logger.debug("Stored document id={} ({} chars)", document.id, len(document.text))

    def get(self, doc_id: int) -> Optional[Document]:
        text = self._docs.get(doc_id)
        if text is None:
            return None
        return Document(id=doc_id, text=text)

    def all(self) -> List[Document]:
        return [Document(id=doc_id, text=text) for doc_id, text in self._docs.items()]

    def count(self) -> int:
        return len(self._docs)
