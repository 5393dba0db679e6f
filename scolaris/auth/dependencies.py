from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from scolaris.auth.schemas import CurrentActor
from scolaris.core.enums import ActorRole
from scolaris.core.tenant_service import resolve_owner_id
from scolaris.db.store import DocumentStore, get_store


def get_current_actor(
    x_role: Optional[str] = Header(None),
    x_account_id: Optional[str] = Header(None),
    store: DocumentStore = Depends(get_store),
) -> CurrentActor:
    """
    Resolve the acting account from request headers set by the session layer.

    Staff accounts are looked up in the document so their tenant comes from the
    owner link stamped when they were created, never from the request.
    """
    try:
        role = ActorRole(x_role) if x_role else None
    except ValueError:
        role = None
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid X-Role header",
        )

    owner_id: Optional[str] = None
    if role in (ActorRole.TEACHER, ActorRole.SUPERVISOR) and x_account_id:
        document = store.load()
        member = next((s for s in document.staff if s.id == x_account_id and s.role.value == role.value), None)
        owner_id = member.owner_id if member else None

    return CurrentActor(
        role=role,
        account_id=x_account_id,
        tenant_id=resolve_owner_id(role, account_id=x_account_id, owner_id=owner_id),
    )


def get_tenant_id(current_actor: CurrentActor = Depends(get_current_actor)) -> Optional[str]:
    return current_actor.tenant_id


def require_principal(current_actor: CurrentActor = Depends(get_current_actor)) -> CurrentActor:
    """Dependency: block staff writes that only the school principal may perform."""
    if current_actor.role != ActorRole.PRINCIPAL:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only a principal can perform this action.",
        )
    return current_actor


def require_super_admin(current_actor: CurrentActor = Depends(get_current_actor)) -> CurrentActor:
    if current_actor.role != ActorRole.SUPERADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Super-admin access required.",
        )
    return current_actor
