from typing import AsyncGenerator, Dict, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from scolaris.api.v1.grades import service as grade_service
from scolaris.api.v1.grades.schemas import GradeInput, GradeSheetSave
from scolaris.api.v1.students import service as student_service
from scolaris.api.v1.students.schemas import StudentCreate, StudentResponse
from scolaris.api.v1.subjects import service as subject_service
from scolaris.api.v1.subjects.schemas import SubjectCreate, SubjectResponse
from scolaris.core.enums import Term
from scolaris.db.store import InMemoryDocumentStore, get_store
from scolaris.main import app


TENANT_A = "principal-a"
TENANT_B = "principal-b"


@pytest.fixture()
def store() -> InMemoryDocumentStore:
    """A fresh in-memory document for each test."""
    return InMemoryDocumentStore()


@pytest_asyncio.fixture()
async def client(store: InMemoryDocumentStore) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app, reading the test store."""
    app.dependency_overrides[get_store] = lambda: store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture()
def add_student(store):
    def _add(tenant_id: str, name: str, level: str = "6ème", classroom: str = "1") -> StudentResponse:
        return student_service.add_student(
            store, tenant_id, StudentCreate(name=name, level=level, classroom=classroom)
        )

    return _add


@pytest.fixture()
def add_subject(store):
    def _add(tenant_id: str, name: str) -> SubjectResponse:
        return subject_service.add_subject(store, tenant_id, SubjectCreate(name=name))

    return _add


@pytest.fixture()
def save_sheet(store):
    """Save one subject/term sheet from {student_id: scores}."""

    def _save(tenant_id: str, subject_id: str, rows: Dict[str, List], term: Term = Term.TERM_1):
        payload = GradeSheetSave(
            subject_id=subject_id,
            term=term,
            entries=[GradeInput(student_id=sid, scores=scores) for sid, scores in rows.items()],
        )
        return grade_service.save_grades(store, tenant_id, payload)

    return _save
