from __future__ import annotations
from typing import List, Optional
from datetime import datetime, timezone

from loguru import logger
from pymongo import MongoClient

from doc_analytics.application.models import Document


class MongoDocumentStore:
    """Store documents in MongoDB, one record per id."""

    def __init__(self, uri: str, db_name: str, collection_name: str):
        logger.info("Connecting to MongoDB at {}", uri)
        self.client = MongoClient(uri)
        self.collection = self.client[db_name][collection_name]

    def upsert(self, document: Document) -> None:
        """
        Uses the document id as _id, so posting the same id twice replaces
        the text instead of creating a duplicate.
        """
        now = datetime.now(timezone.utc)
        self.collection.update_one(
            {"_id": document.id},
            {
                "$set": {"text": document.text, "updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )
        logger.info("Mongo upserted document id={}", document.id)

    def get(self, doc_id: int) -> Optional[Document]:
        # project only the text field (1)
        doc = self.collection.find_one({"_id": doc_id}, {"text": 1})
        if doc is None:
            return None
        return Document(id=int(doc["_id"]), text=doc.get("text", ""))

    def all(self) -> List[Document]:
        cursor = self.collection.find({}, {"text": 1})
        return [Document(id=int(doc["_id"]), text=doc.get("text", "")) for doc in cursor]

    def count(self) -> int:
        return self.collection.count_documents({})
