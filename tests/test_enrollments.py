"""POST / DELETE /api/v2/students/{studentId} — a student's own enrollments."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.conftest import bearer

ME = "650610001"
URL = f"/api/v2/students/{ME}"


def _drop(client: TestClient, url: str, token: str, body=None):
    return client.request("DELETE", url, json=body, headers=bearer(token))


def _enrolled_courses(client: TestClient, admin_token: str, student_id: str) -> list:
    rows = client.get("/api/v2/students", headers=bearer(admin_token)).json()["data"]
    row = next(r for r in rows if r["studentId"] == student_id)
    return [c["courseId"] for c in row["courses"]]


# ---- 201 / 409: enroll ----


def test_enroll_then_duplicate_conflicts(client: TestClient, student_token: str) -> None:
    first = client.post(URL, json={"courseId": "269101"}, headers=bearer(student_token))
    assert first.status_code == 201
    assert first.json() == {
        "success": True,
        "message": f"Course 269101 added for student {ME}",
        "data": {"studentId": ME, "courseId": "269101"},
    }

    second = client.post(URL, json={"courseId": "269101"}, headers=bearer(student_token))
    assert second.status_code == 409
    assert second.json()["message"] == f"Course 269101 already registered for student {ME}"


def test_enroll_seeded_course_conflicts(client: TestClient, student_token: str) -> None:
    resp = client.post(URL, json={"courseId": "261207"}, headers=bearer(student_token))
    assert resp.status_code == 409


def test_enroll_shows_up_in_student_record(
    client: TestClient, student_token: str, admin_token: str
) -> None:
    client.post(URL, json={"courseId": "269101"}, headers=bearer(student_token))
    assert _enrolled_courses(client, admin_token, ME) == ["261207", "261497", "269101"]


# ---- 403: ownership and role ----


def test_enroll_for_another_student_is_forbidden(client: TestClient, student_token: str) -> None:
    resp = client.post("/api/v2/students/650610002", json={"courseId": "269101"}, headers=bearer(student_token))
    assert resp.status_code == 403
    assert resp.json()["message"] == "Forbidden: cannot add course for another student"


def test_foreign_id_checked_before_format(client: TestClient, make_token) -> None:
    token = make_token("s1@abc.com", "STUDENT", "S001")
    resp = client.post("/api/v2/students/S002", json={"courseId": "anything"}, headers=bearer(token))
    assert resp.status_code == 403


def test_drop_for_another_student_is_forbidden(client: TestClient, other_student_token: str) -> None:
    resp = _drop(client, URL, other_student_token, {"courseId": "261207"})
    assert resp.status_code == 403
    assert resp.json()["message"] == "Forbidden: cannot drop course for another student"


def test_admin_cannot_enroll(client: TestClient, admin_token: str) -> None:
    resp = client.post(URL, json={"courseId": "269101"}, headers=bearer(admin_token))
    assert resp.status_code == 403


def test_enroll_requires_token(client: TestClient) -> None:
    assert client.post(URL, json={"courseId": "269101"}).status_code == 401


# ---- 400: validation ----


@pytest.mark.parametrize("bad_id", ["abc", "65061", "65061000x"])
def test_malformed_student_id_is_400(client: TestClient, make_token, bad_id: str) -> None:
    token = make_token("odd@abc.com", "STUDENT", bad_id)
    url = f"/api/v2/students/{bad_id}"

    enroll = client.post(url, json={"courseId": "269101"}, headers=bearer(token))
    assert enroll.status_code == 400
    assert enroll.json()["errors"] == "Student Id must contain exactly 9 digits"

    drop = _drop(client, url, token, {"courseId": "269101"})
    assert drop.status_code == 400


@pytest.mark.parametrize("body", [None, {}, {"courseId": "26120"}, {"courseId": 261207}, {"course": "261207"}, {"courseId": "٢٦١٢٠٧"}])
def test_bad_enrollment_body_is_400(client: TestClient, student_token: str, body) -> None:
    resp = client.post(URL, json=body, headers=bearer(student_token))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"


def test_non_object_body_is_400(client: TestClient, student_token: str) -> None:
    resp = client.post(URL, json=["261207"], headers=bearer(student_token))
    assert resp.status_code == 400
    assert resp.json()["success"] is False


# ---- 200 / 404: drop ----


def test_drop_missing_pair_is_404(client: TestClient, student_token: str) -> None:
    resp = _drop(client, URL, student_token, {"courseId": "269101"})
    assert resp.status_code == 404
    assert resp.json()["message"] == f"Course 269101 not found for student {ME}"


def test_drop_after_enroll(client: TestClient, student_token: str, admin_token: str) -> None:
    assert client.post(URL, json={"courseId": "269101"}, headers=bearer(student_token)).status_code == 201

    resp = _drop(client, URL, student_token, {"courseId": "269101"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == f"Course 269101 dropped for student {ME}"
    assert body["data"] == [
        {"studentId": ME, "courseId": "261207"},
        {"studentId": ME, "courseId": "261497"},
    ]
    assert "269101" not in _enrolled_courses(client, admin_token, ME)

    again = _drop(client, URL, student_token, {"courseId": "269101"})
    assert again.status_code == 404


def test_drop_seeded_course(client: TestClient, student_token: str, admin_token: str) -> None:
    resp = _drop(client, URL, student_token, {"courseId": "261207"})
    assert resp.status_code == 200
    assert resp.json()["data"] == [{"studentId": ME, "courseId": "261497"}]
    assert _enrolled_courses(client, admin_token, ME) == ["261497"]
