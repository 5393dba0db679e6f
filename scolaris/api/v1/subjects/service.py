import logging
from typing import List, Optional

from fastapi import status

from scolaris.core.exceptions import ServiceError
from scolaris.core.models import Document, Subject
from scolaris.core.tenant_service import require_tenant, tenant_scope
from scolaris.db.store import DocumentStore

from .schemas import SubjectCreate, SubjectResponse

logger = logging.getLogger(__name__)


def _to_response(s: Subject) -> SubjectResponse:
    return SubjectResponse.model_validate(s, from_attributes=True)


def scoped_subjects(document: Document, tenant_id: Optional[str]) -> List[Subject]:
    return tenant_scope(tenant_id, document.subjects)


def get_subject_for_tenant(document: Document, tenant_id: Optional[str], subject_id: str) -> Subject:
    subject = next((s for s in scoped_subjects(document, tenant_id) if s.id == subject_id), None)
    if not subject:
        raise ServiceError(f"Subject not found: {subject_id}", status.HTTP_404_NOT_FOUND)
    return subject


def list_subjects(store: DocumentStore, tenant_id: Optional[str]) -> List[SubjectResponse]:
    return [_to_response(s) for s in scoped_subjects(store.load(), tenant_id)]


def add_subject(store: DocumentStore, tenant_id: Optional[str], payload: SubjectCreate) -> SubjectResponse:
    tenant_id = require_tenant(tenant_id)
    name = payload.name.strip()
    document = store.load()
    if any(s.name.lower() == name.lower() for s in scoped_subjects(document, tenant_id)):
        raise ServiceError(f"Subject '{name}' already exists", status.HTTP_409_CONFLICT)
    obj = Subject(owner_id=tenant_id, name=name)
    document.subjects.append(obj)
    store.replace(document)
    logger.info("Subject %s (%s) created for tenant %s", obj.id, name, tenant_id)
    return _to_response(obj)


def delete_subject(store: DocumentStore, tenant_id: Optional[str], subject_id: str) -> bool:
    """Grade entries for the subject stay stored but drop out of reports."""
    document = store.load()
    if not any(s.id == subject_id for s in scoped_subjects(document, tenant_id)):
        return False
    document.subjects = [s for s in document.subjects if s.id != subject_id]
    store.replace(document)
    logger.info("Subject %s deleted for tenant %s", subject_id, tenant_id)
    return True
