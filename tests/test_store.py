import json
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from scolaris.core.models import OWNED_COLLECTIONS, Absence, Document, Fee, GradeEntry, Student
from scolaris.core.enums import Month, Term
from scolaris.db.seed_subjects import DEFAULT_SUBJECTS
from scolaris.db import store as store_module
from scolaris.db.store import InMemoryDocumentStore, JsonFileDocumentStore, SqlDocumentStore


def _populated() -> Document:
    student = Student(name="Amina", level="6ème", classroom="1", owner_id="p-1")
    return Document(
        students=[student],
        grades=[
            GradeEntry(
                student_id=student.id,
                subject_id="sub_math",
                term=Term.TERM_1,
                scores=[15, 17, None, None, None],
                average=16,
                remark="Bien",
                owner_id="p-1",
            )
        ],
        absences=[Absence(student_id=student.id, hours=2, reason="Malade", owner_id="p-1")],
        fees=[Fee(student_id=student.id, month=Month.OCTOBER, amount=15000, owner_id="p-1")],
    )


@pytest.fixture(params=["memory", "json", "sql"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return InMemoryDocumentStore()
    if request.param == "json":
        return JsonFileDocumentStore(str(tmp_path / "data" / "document.json"))
    return SqlDocumentStore(f"sqlite:///{tmp_path / 'document.db'}")


def test_empty_store_loads_initialized_document(any_store) -> None:
    document = any_store.load()
    for name in OWNED_COLLECTIONS:
        if name != "subjects":
            assert document.collection(name) == []
    assert [(s.id, s.name) for s in document.subjects] == DEFAULT_SUBJECTS
    assert all(s.owner_id is None for s in document.subjects)


def test_round_trip_without_mutation(any_store) -> None:
    any_store.replace(_populated())
    before = any_store.load()

    any_store.replace(any_store.load())
    after = any_store.load()

    for name in OWNED_COLLECTIONS + ("principals",):
        assert json.dumps(after.model_dump(mode="json")[name]) == json.dumps(before.model_dump(mode="json")[name])


def test_replace_bumps_version_and_is_visible_on_next_load(any_store) -> None:
    document = any_store.load()
    assert document.version == 0

    document.students.append(Student(name="Bilal", level="5ème", owner_id="p-1"))
    any_store.replace(document)

    reloaded = any_store.load()
    assert reloaded.version == 1
    assert reloaded.updated_at is not None
    assert [s.name for s in reloaded.students] == ["Bilal"]


def test_load_returns_an_independent_copy() -> None:
    store = InMemoryDocumentStore(_populated())
    document = store.load()
    document.students.clear()
    assert len(store.load().students) == 1


def test_unknown_fields_survive_a_round_trip(tmp_path) -> None:
    path = tmp_path / "document.json"
    raw = _populated().model_dump(mode="json")
    raw["school_year"] = "2025-2026"
    raw["students"][0]["nickname"] = "Mimi"
    path.write_text(json.dumps(raw), encoding="utf-8")

    store = JsonFileDocumentStore(str(path))
    store.replace(store.load())
    saved = json.loads(path.read_text(encoding="utf-8"))

    assert saved["school_year"] == "2025-2026"
    assert saved["students"][0]["nickname"] == "Mimi"


def test_legacy_payload_is_normalized() -> None:
    document = Document.model_validate({
        "students": [{"id": "old-1", "name": "Legacy", "level": "6ème", "classroom": None, "owner_id": ""}],
        "grades": None,
        "subjects": [],
    })
    assert document.students[0].owner_id is None
    assert document.students[0].classroom == ""
    assert document.grades == []
    assert len(document.subjects) == len(DEFAULT_SUBJECTS)


def test_sql_store_keeps_documents_apart_by_key(tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'document.db'}"
    first = SqlDocumentStore(url, key="school-1")
    second = SqlDocumentStore(url, key="school-2")

    first.replace(_populated())

    assert len(first.load().students) == 1
    assert second.load().students == []


def test_unknown_class_assignment_fields_survive_a_round_trip(tmp_path) -> None:
    path = tmp_path / "document.json"
    raw = Document().model_dump(mode="json")
    raw["staff"] = [
        {
            "role": "teacher",
            "first_name": "Omar",
            "last_name": "Ali",
            "owner_id": "p-1",
            "assigned_classes": [{"level": "6ème", "division": "1", "room": "B12"}],
        }
    ]
    path.write_text(json.dumps(raw), encoding="utf-8")

    store = JsonFileDocumentStore(str(path))
    store.replace(store.load())
    saved = json.loads(path.read_text(encoding="utf-8"))

    assert saved["staff"][0]["assigned_classes"] == [{"level": "6ème", "division": "1", "room": "B12"}]


class _FailingStore(InMemoryDocumentStore):
    def _write(self, payload, version, updated_at) -> None:
        raise OSError("disk full")


def test_failed_write_leaves_the_document_unstamped() -> None:
    store = _FailingStore(_populated())
    document = store.load()
    assert document.version == 0

    with pytest.raises(OSError):
        store.replace(document)

    assert document.version == 0
    assert document.updated_at is None
    assert store.load().version == 0


def test_get_store_builds_a_single_store_across_threads(monkeypatch) -> None:
    built = []

    def _build(backend=None):
        time.sleep(0.01)
        store = InMemoryDocumentStore()
        built.append(store)
        return store

    monkeypatch.setattr(store_module, "_store", None)
    monkeypatch.setattr(store_module, "build_store", _build)

    with ThreadPoolExecutor(max_workers=8) as pool:
        stores = list(pool.map(lambda _: store_module.get_store(), range(8)))

    assert len(built) == 1
    assert all(s is built[0] for s in stores)
