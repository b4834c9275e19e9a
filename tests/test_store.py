"""In-memory store and enrollment CRUD, without HTTP."""
from __future__ import annotations

from app.core.security_password import check_password
from app.crud.enrollment import enrollment_crud
from app.crud.student import student_crud
from app.db.store import Store
from app.models import Enrollment


def test_seed_state() -> None:
    store = Store()
    assert [s.student_id for s in store.students] == ["650610001", "650610002", "650610003"]
    assert len(store.courses) == 3
    assert len(store.enrollments) == 6
    assert {u.role for u in store.users} == {"ADMIN", "STUDENT"}


def test_seed_passwords_are_hashed() -> None:
    store = Store()
    admin = store.users[0]
    assert admin.password != "1234"
    ok, _ = check_password("1234", admin.password)
    assert ok
    assert "password" not in admin.to_json()


def test_enroll_rejects_duplicate_pair() -> None:
    store = Store()
    assert enrollment_crud.enroll(store, student_id="650610003", course_id="261207") is not None
    assert enrollment_crud.enroll(store, student_id="650610003", course_id="261207") is None
    pairs = [(e.student_id, e.course_id) for e in store.enrollments]
    assert len(pairs) == len(set(pairs))


def test_drop_removes_only_first_match() -> None:
    store = Store()
    # duplicata inserida à mão para checar remoção por posição
    store.enrollments.append(Enrollment(student_id="650610001", course_id="261207"))
    remaining = enrollment_crud.drop(store, student_id="650610001", course_id="261207")
    assert [e.course_id for e in remaining] == ["261497", "261207"]


def test_drop_unknown_pair_returns_none() -> None:
    store = Store()
    assert enrollment_crud.drop(store, student_id="650610001", course_id="269101") is None


def test_reset_does_not_share_seed_objects() -> None:
    store = Store()
    student_crud.get(store, "650610001").courses.append("999999")
    store.reset()
    assert student_crud.get(store, "650610001").courses == ["261207", "261497"]
    assert Store().students[0].courses == ["261207", "261497"]


def test_reset_db_empties_everything() -> None:
    store = Store()
    store.reset_db()
    assert store.students == store.courses == store.enrollments == store.users == []
