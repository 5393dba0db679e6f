"""
Principal account management. Super-admin only: this is the one place the
document is read without tenant scoping.
"""
import logging
from typing import Dict, List

from scolaris.api.v1.staff.service import unique_username
from scolaris.auth.usernames import PRINCIPAL_PREFIX
from scolaris.core.models import OWNED_COLLECTIONS, Principal
from scolaris.core.tenant_service import scope_to
from scolaris.db.store import DocumentStore

from .schemas import PrincipalCreate, PrincipalResponse

logger = logging.getLogger(__name__)


def _to_response(p: Principal) -> PrincipalResponse:
    return PrincipalResponse.model_validate(p, from_attributes=True)


def list_principals(store: DocumentStore) -> List[PrincipalResponse]:
    return [_to_response(p) for p in scope_to(None, store.load().principals)]


def add_principal(store: DocumentStore, payload: PrincipalCreate) -> PrincipalResponse:
    document = store.load()
    first_name = payload.first_name.strip()
    last_name = payload.last_name.strip()
    obj = Principal(
        first_name=first_name,
        last_name=last_name,
        college_name=payload.college_name.strip() if payload.college_name else None,
        username=unique_username(document, last_name, first_name, PRINCIPAL_PREFIX),
    )
    document.principals.append(obj)
    store.replace(document)
    logger.info("Principal %s created (%s)", obj.id, obj.college_name or "-")
    return _to_response(obj)


def delete_principal(store: DocumentStore, principal_id: str) -> bool:
    """Removes the account only; its school's records keep their owner reference."""
    document = store.load()
    if not any(p.id == principal_id for p in document.principals):
        return False
    document.principals = [p for p in document.principals if p.id != principal_id]
    store.replace(document)
    logger.info("Principal %s deleted", principal_id)
    return True


def school_record_counts(store: DocumentStore, principal_id: str) -> Dict[str, int]:
    """Per-collection record counts of one school."""
    document = store.load()
    return {name: len(scope_to(principal_id, document.collection(name))) for name in OWNED_COLLECTIONS}
