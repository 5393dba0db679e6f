"""
Document store: the whole dataset lives in one versioned document.

Callers load the document, mutate their in-memory copy and replace it as a
unit. There is no partial update and no locking; the last replace wins.
"""
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, Text, create_engine, select
from sqlalchemy.orm import Session, declarative_base

from scolaris.core.config import settings
from scolaris.core.models import Document
from scolaris.core.models.record import utcnow

logger = logging.getLogger(__name__)

Base = declarative_base()


def dump_document(document: Document) -> str:
    return json.dumps(document.model_dump(mode="json"), ensure_ascii=False, sort_keys=True)


def parse_document(raw: Optional[str]) -> Document:
    """Parse a serialized document; empty input gives an initialized empty document."""
    if not raw or not raw.strip():
        return Document()
    return Document.model_validate(json.loads(raw))


class DocumentStore(ABC):
    """Atomic read / whole-document replace."""

    @abstractmethod
    def load(self) -> Document:
        """Return the persisted document, or an initialized empty one."""

    @abstractmethod
    def _write(self, payload: str, version: int, updated_at: datetime) -> None:
        """Persist the serialized document in one step."""

    def replace(self, document: Document) -> None:
        """
        Overwrite the stored document with `document`, bumping its version.
        The caller's document is stamped only once the write has succeeded.
        """
        version = document.version + 1
        updated_at = utcnow()
        payload = dump_document(document.model_copy(update={"version": version, "updated_at": updated_at}))
        self._write(payload, version, updated_at)
        document.version = version
        document.updated_at = updated_at
        logger.debug("Document replaced (version=%s)", version)


class InMemoryDocumentStore(DocumentStore):
    """Keeps the serialized document; every load hands out a fresh copy."""

    def __init__(self, document: Optional[Document] = None) -> None:
        self._payload: Optional[str] = dump_document(document) if document is not None else None

    def load(self) -> Document:
        return parse_document(self._payload)

    def _write(self, payload: str, version: int, updated_at: datetime) -> None:
        self._payload = payload


class JsonFileDocumentStore(DocumentStore):
    """JSON file on disk, replaced through a temporary file and os.replace."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def load(self) -> Document:
        if not self.path.exists():
            return Document()
        document = parse_document(self.path.read_text(encoding="utf-8"))
        logger.debug("Loaded %s (version=%s)", self.path, document.version)
        return document

    def _write(self, payload: str, version: int, updated_at: datetime) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".scolaris-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class StoredDocument(Base):
    __tablename__ = "scolaris_documents"

    key = Column(String(100), primary_key=True)
    version = Column(Integer, nullable=False, default=0)
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)


class SqlDocumentStore(DocumentStore):
    """One row per document in a SQL table; replace is a single-transaction upsert."""

    def __init__(self, database_url: str, key: str = "default") -> None:
        self.key = key
        # pool_pre_ping: check connection is alive before use.
        self.engine = create_engine(database_url, future=True, pool_pre_ping=True)
        Base.metadata.create_all(self.engine)

    def load(self) -> Document:
        with Session(self.engine) as session:
            row = session.execute(
                select(StoredDocument).where(StoredDocument.key == self.key)
            ).scalar_one_or_none()
            return parse_document(row.payload if row else None)

    def _write(self, payload: str, version: int, updated_at: datetime) -> None:
        with Session(self.engine) as session, session.begin():
            row = session.get(StoredDocument, self.key)
            if row is None:
                row = StoredDocument(key=self.key)
                session.add(row)
            row.payload = payload
            row.version = version
            row.updated_at = updated_at


def build_store(backend: Optional[str] = None) -> DocumentStore:
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "json":
        return JsonFileDocumentStore(settings.document_path)
    if backend == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for the sql store backend")
        if settings.database_url.startswith("sqlite:///"):
            Path(settings.database_url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
        return SqlDocumentStore(settings.database_url, settings.document_key)
    raise ValueError(f"Unknown store backend: {backend}")


_store: Optional[DocumentStore] = None
_store_lock = threading.Lock()


def get_store() -> DocumentStore:
    """FastAPI dependency: the process-wide document store."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = build_store()
    return _store
