import pytest
from httpx import AsyncClient

from scolaris.api.v1.staff import service as staff_service

PRINCIPAL_A = {"X-Role": "principal", "X-Account-ID": "principal-a"}
PRINCIPAL_B = {"X-Role": "principal", "X-Account-ID": "principal-b"}
SUPERADMIN = {"X-Role": "superadmin"}


async def _create_student(client: AsyncClient, headers, name="Amina", classroom="1"):
    response = await client.post(
        "/api/v1/students",
        json={"name": name, "level": "6ème", "classroom": classroom},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_missing_role_is_unauthorized(client: AsyncClient) -> None:
    response = await client.get("/api/v1/students")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_students_are_isolated_per_tenant(client: AsyncClient) -> None:
    student = await _create_student(client, PRINCIPAL_A)
    assert student["owner_id"] == "principal-a"

    mine = await client.get("/api/v1/students", headers=PRINCIPAL_A)
    theirs = await client.get("/api/v1/students", headers=PRINCIPAL_B)
    assert [s["id"] for s in mine.json()] == [student["id"]]
    assert theirs.json() == []

    response = await client.get(f"/api/v1/students/{student['id']}", headers=PRINCIPAL_B)
    assert response.status_code == 404
    response = await client.delete(f"/api/v1/students/{student['id']}", headers=PRINCIPAL_B)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_super_admin_sees_no_tenant_data(client: AsyncClient) -> None:
    await _create_student(client, PRINCIPAL_A)
    response = await client.get("/api/v1/students", headers=SUPERADMIN)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_principal_management_requires_super_admin(client: AsyncClient) -> None:
    payload = {"first_name": "Amina", "last_name": "Hassan", "college_name": "Collège Baraka"}

    response = await client.post("/api/v1/principals", json=payload, headers=PRINCIPAL_A)
    assert response.status_code == 403

    response = await client.post("/api/v1/principals", json=payload, headers=SUPERADMIN)
    assert response.status_code == 201
    principal = response.json()
    assert principal["username"].startswith("prin.hassan.amina")

    listed = await client.get("/api/v1/principals", headers=SUPERADMIN)
    assert [p["id"] for p in listed.json()] == [principal["id"]]

    deleted = await client.delete(f"/api/v1/principals/{principal['id']}", headers=SUPERADMIN)
    assert deleted.status_code == 204


@pytest.mark.asyncio
async def test_teacher_acts_for_its_principal(client: AsyncClient) -> None:
    student = await _create_student(client, PRINCIPAL_A)
    response = await client.post(
        "/api/v1/staff",
        json={
            "role": "teacher",
            "first_name": "Omar",
            "last_name": "Ali",
            "assigned_classes": [{"level": "6ème", "division": "1"}],
        },
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 201
    teacher = response.json()
    teacher_headers = {"X-Role": "teacher", "X-Account-ID": teacher["id"]}

    listed = await client.get("/api/v1/students", headers=teacher_headers)
    assert [s["id"] for s in listed.json()] == [student["id"]]

    # staff cannot create staff
    response = await client.post(
        "/api/v1/staff",
        json={"role": "supervisor", "first_name": "X", "last_name": "Y"},
        headers=teacher_headers,
    )
    assert response.status_code == 403

    # an unknown teacher account resolves to no tenant
    unknown = await client.get("/api/v1/students", headers={"X-Role": "teacher", "X-Account-ID": "nope"})
    assert unknown.json() == []


@pytest.mark.asyncio
async def test_fee_with_wrong_amount_is_rejected(client: AsyncClient) -> None:
    student = await _create_student(client, PRINCIPAL_A)
    response = await client.post(
        "/api/v1/fees",
        json={"student_id": student["id"], "month": "Octobre", "amount": 10000},
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 400

    response = await client.post(
        "/api/v1/fees",
        json={"student_id": student["id"], "month": "Octobre", "amount": 15000},
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_grade_sheet_and_report_card(client: AsyncClient) -> None:
    amina = await _create_student(client, PRINCIPAL_A, "Amina")
    bilal = await _create_student(client, PRINCIPAL_A, "Bilal")
    subject = (await client.post("/api/v1/subjects", json={"name": "Maths"}, headers=PRINCIPAL_A)).json()

    response = await client.put(
        "/api/v1/grades",
        json={
            "subject_id": subject["id"],
            "term": "Trimestre 1",
            "entries": [
                {"student_id": amina["id"], "scores": ["15", "17", "", "", ""], "remark": "Très bien"},
                {"student_id": bilal["id"], "scores": ["", "", "", "", ""]},
            ],
        },
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 200
    assert response.json() == {"saved": 1, "cleared": 0}

    average = await client.get(
        "/api/v1/grades/average",
        params={"student_id": amina["id"], "subject_id": subject["id"], "term": "Trimestre 1"},
        headers=PRINCIPAL_A,
    )
    assert average.json()["average"] == 16.0

    report = await client.get(
        f"/api/v1/reports/students/{amina['id']}",
        params={"term": "Trimestre 1"},
        headers=PRINCIPAL_A,
    )
    assert report.status_code == 200
    body = report.json()
    [row] = body["rows"]
    assert row["scores_display"] == "15, 17"
    assert row["rank_display"] == "1er/1"
    assert row["remark"] == "Très bien"
    assert body["summary"]["general_average"] == 16.0

    hidden = await client.get(f"/api/v1/reports/students/{amina['id']}", headers=PRINCIPAL_B)
    assert hidden.status_code == 404


@pytest.mark.asyncio
async def test_out_of_range_score_is_unprocessable(client: AsyncClient) -> None:
    amina = await _create_student(client, PRINCIPAL_A)
    subject = (await client.post("/api/v1/subjects", json={"name": "Maths"}, headers=PRINCIPAL_A)).json()
    response = await client.put(
        "/api/v1/grades",
        json={
            "subject_id": subject["id"],
            "term": "Trimestre 1",
            "entries": [{"student_id": amina["id"], "scores": [25]}],
        },
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_claim_legacy_records(client: AsyncClient) -> None:
    status = await client.get("/api/v1/ownership/legacy", headers=PRINCIPAL_A)
    assert status.json()["has_unowned"] is True

    subjects_before = await client.get("/api/v1/subjects", headers=PRINCIPAL_A)
    assert subjects_before.json() == []

    claimed = await client.post("/api/v1/ownership/claim", headers=PRINCIPAL_A)
    assert claimed.json()["claimed"] == 8
    again = await client.post("/api/v1/ownership/claim", headers=PRINCIPAL_A)
    assert again.json()["claimed"] == 0

    subjects_after = await client.get("/api/v1/subjects", headers=PRINCIPAL_A)
    assert len(subjects_after.json()) == 8
    assert (await client.get("/api/v1/subjects", headers=PRINCIPAL_B)).json() == []


@pytest.mark.asyncio
async def test_dashboard_endpoint(client: AsyncClient) -> None:
    await _create_student(client, PRINCIPAL_A)
    response = await client.get("/api/v1/dashboard", headers=PRINCIPAL_A)
    assert response.status_code == 200
    assert response.json()["students_count"] == 1


@pytest.mark.asyncio
async def test_score_row_sent_as_text_is_unprocessable(client: AsyncClient, store) -> None:
    amina = await _create_student(client, PRINCIPAL_A)
    subject = (await client.post("/api/v1/subjects", json={"name": "Maths"}, headers=PRINCIPAL_A)).json()
    response = await client.put(
        "/api/v1/grades",
        json={
            "subject_id": subject["id"],
            "term": "Trimestre 1",
            "entries": [{"student_id": amina["id"], "scores": "15"}],
        },
        headers=PRINCIPAL_A,
    )
    assert response.status_code == 422
    assert store.load().grades == []


@pytest.mark.asyncio
async def test_principal_username_exhaustion_is_a_conflict(client: AsyncClient, monkeypatch) -> None:
    monkeypatch.setattr(staff_service, "generate_username", lambda last, first, prefix="": "prin.hassan.amina00")
    payload = {"first_name": "Amina", "last_name": "Hassan"}

    first = await client.post("/api/v1/principals", json=payload, headers=SUPERADMIN)
    assert first.status_code == 201

    second = await client.post("/api/v1/principals", json=payload, headers=SUPERADMIN)
    assert second.status_code == 409
    assert second.json()["detail"] == "Could not generate a unique username"
