"""
Tenant service: ownership scoping and legacy-record claiming.

- A tenant is a principal account; its id is stamped as owner_id on every record
  its school creates (by the principal or by its staff).
- owner_id is None only for legacy records. They are invisible to every tenant
  until claimed, and claiming is one-time per record.
"""
import logging
from typing import Iterable, List, Optional, TypeVar

from fastapi import status

from scolaris.core.enums import ActorRole
from scolaris.core.exceptions import ServiceError
from scolaris.core.models import OWNED_COLLECTIONS, Document, Record
from scolaris.db.store import DocumentStore

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def scope_to(tenant_id: Optional[str], records: Iterable[R]) -> List[R]:
    """
    Records owned by `tenant_id`. Unowned records are never included.

    tenant_id=None is the super-admin read and returns everything unchanged; only
    principal-account management may call it that way.
    """
    if tenant_id is None:
        return list(records)
    return [r for r in records if r.owner_id is not None and r.owner_id == tenant_id]


def tenant_scope(tenant_id: Optional[str], records: Iterable[R]) -> List[R]:
    """Tenant-scoped read: no tenant identity means no visible data."""
    if not tenant_id:
        return []
    return scope_to(tenant_id, records)


def require_tenant(tenant_id: Optional[str]) -> str:
    """Guard for writes: refuse before any mutation when the caller has no tenant."""
    if not tenant_id:
        logger.warning("Write refused: no tenant identity")
        raise ServiceError("A tenant identity is required for this operation", status.HTTP_400_BAD_REQUEST)
    return tenant_id


def count_unowned(document: Document) -> int:
    return sum(
        1
        for name in OWNED_COLLECTIONS
        for record in document.collection(name)
        if record.owner_id is None
    )


def has_unowned(document: Document) -> bool:
    return count_unowned(document) > 0


def claim_unowned(store: DocumentStore, tenant_id: str) -> int:
    """
    Assign every unowned record in the document to `tenant_id`.

    Returns the number of records claimed. Nothing is written when there is
    nothing to claim, so a second call returns 0 and leaves the document as is.
    """
    tenant_id = require_tenant(tenant_id)
    document = store.load()
    count = 0
    for name in OWNED_COLLECTIONS:
        for record in document.collection(name):
            if record.owner_id is None:
                record.owner_id = tenant_id
                count += 1
    if count:
        store.replace(document)
        logger.info("Tenant %s claimed %d legacy records", tenant_id, count)
    return count


def resolve_owner_id(role: ActorRole, account_id: Optional[str] = None, owner_id: Optional[str] = None) -> Optional[str]:
    """
    Tenant identity of an acting account.

    superadmin -> None (manages principals, owns nothing)
    principal  -> its own id
    teacher / supervisor -> the principal that created it (owner_id)
    """
    if role == ActorRole.SUPERADMIN:
        return None
    if role == ActorRole.PRINCIPAL:
        return account_id
    if role in (ActorRole.TEACHER, ActorRole.SUPERVISOR):
        return owner_id
    return None
