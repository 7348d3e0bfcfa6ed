from __future__ import annotations
from dataclasses import dataclass, replace
from typing import List, Optional
from loguru import logger

from doc_analytics.application.settings import Settings
from doc_analytics.application.errors import DocumentNotFound, DocumentValidationError, NoDocumentsInCorpus
from doc_analytics.application.models import Document, DocumentStatistics, TopWords
from doc_analytics.application.services.analytics import TextAnalytics
from doc_analytics.application.services.document_store import InMemoryDocumentStore
from doc_analytics.application.services.mongo_store import MongoDocumentStore
from doc_analytics.application.services.normalizer import TextNormalizer
from doc_analytics.application.services.stop_words import StopWordSource


@dataclass
class DocumentService:
    # store is either InMemoryDocumentStore or MongoDocumentStore
    store: InMemoryDocumentStore | MongoDocumentStore
    analytics: TextAnalytics
    backend: str = "memory"  # "memory" or "mongo"

    @classmethod
    def build(cls, settings: Settings) -> "DocumentService":
        stop_words = StopWordSource.from_settings(settings)
        analytics = TextAnalytics(normalizer=TextNormalizer(stop_words=stop_words))

        if settings.mongo_uri and settings.use_mongo:
            logger.info("Using MongoDB document store at {}", settings.mongo_uri)
            store = MongoDocumentStore(
                uri=settings.mongo_uri,
                db_name=settings.mongo_db_name,
                collection_name=settings.mongo_collection_docs,
            )
            backend = "mongo"
        else:
            if settings.use_mongo:
                logger.warning("use_mongo is True but mongo_uri is not set; falling back to memory store")
            logger.info("Using in-memory document store")
            store = InMemoryDocumentStore()
            backend = "memory"

        return cls(store=store, analytics=analytics, backend=backend)

    # ---------------- lookups ----------------

    def _require(self, doc_id: int) -> Document:
        document = self.store.get(doc_id)
        if document is None:
            logger.debug("Document id={} not found", doc_id)
            raise DocumentNotFound()
        return document

    def _corpus(self) -> List[Document]:
        documents = self.store.all()
        if not documents:
            raise NoDocumentsInCorpus()
        return documents

    # ---------------- operations ----------------

    def create(self, doc_id: Optional[int], text: Optional[str]) -> Document:
        if doc_id is None or text is None or not text.strip():
            raise DocumentValidationError()
        document = Document(id=doc_id, text=text)
        self.store.upsert(document)
        logger.info("Saved document id={} via {}", doc_id, self.backend)
        return document

    def get(self, doc_id: int) -> Document:
        return self._require(doc_id)

    def get_normalized(self, doc_id: int) -> Document:
        """Normalized view of a document. The stored text is left untouched."""
        document = self._require(doc_id)
        return replace(document, text=self.analytics.normalizer.text(document.text))

    def get_statistics(self, doc_id: int) -> DocumentStatistics:
        return self.analytics.statistics(self._require(doc_id).text)

    def get_all_statistics(self) -> dict[str, int]:
        documents = self._corpus()
        logger.debug("Aggregating statistics over {} document(s)", len(documents))
        return self.analytics.aggregate_statistics(documents)

    def get_top_words(self, doc_id: int) -> TopWords:
        return self.analytics.top_words(self._require(doc_id).text)

    def get_bigrams(self, doc_id: int) -> TopWords:
        return self.analytics.bigrams(self._require(doc_id).text)

    def search_by_word(self, word: str) -> List[int]:
        ids = self.analytics.search_by_word(self._corpus(), word)
        logger.debug("Search word={!r} matched {} document(s)", word, len(ids))
        return ids
