# app/api/v2/students.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, Path, status

from app.api.deps import get_auth_context, get_bearer_token, get_settings, get_store
from app.core.config import Settings
from app.core.errors import Conflict, Forbidden, NotFound
from app.core.rbac import require_admin, require_any_role, require_student
from app.crud.enrollment import enrollment_crud
from app.crud.student import student_crud
from app.db.store import Store
from app.schemas.enrollment import parse_enrollment_body
from app.schemas.response import envelope
from app.schemas.student import CourseRef, StudentSummary, parse_student_id
from app.schemas.token import AuthContext

logger = logging.getLogger(__name__)

router = APIRouter()

def _summary(student) -> dict:
    return StudentSummary(
        student_id=student.student_id,
        courses=[CourseRef(course_id=c) for c in student.courses],
    ).model_dump(by_alias=True)

def _ensure_owner(auth: AuthContext, student_id: str, action: str) -> None:
    # o aluno só mexe nas próprias matrículas
    if auth.student_id != student_id:
        logger.warning("user=%s tried to %s course for student %s", auth.username, action, student_id)
        raise Forbidden(f"Forbidden: cannot {action} course for another student")

def reset_guard(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reset é anônimo, a menos que RESET_REQUIRES_ADMIN esteja ligado."""
    if not settings.RESET_REQUIRES_ADMIN:
        return
    auth = get_auth_context(get_bearer_token(authorization), settings)
    require_admin(auth)

@router.get("")
def list_students(
    store: Store = Depends(get_store),
    _: AuthContext = Depends(require_admin),
):
    with store.lock:
        data = [_summary(s) for s in student_crud.get_multi(store)]
    return envelope("Enrollment Information", data)

# declarado antes de /{student_id} para não ser capturado pelo path param
@router.post("/reset", dependencies=[Depends(reset_guard)])
def reset_database(store: Store = Depends(get_store)):
    store.reset()
    return envelope("enrollment database has been reset")

@router.get("/{student_id}")
def get_student(
    student_id: str = Path(...),
    store: Store = Depends(get_store),
    _: AuthContext = Depends(require_any_role),
):
    student_id = parse_student_id(student_id)
    with store.lock:
        s = student_crud.get(store, student_id)
        if not s:
            raise NotFound("Student does not exists")
        data = s.to_json()
    return envelope("Student Information", data)

@router.post("/{student_id}", status_code=status.HTTP_201_CREATED)
def enroll_course(
    student_id: str = Path(...),
    body: Optional[Dict[str, Any]] = Body(None),
    store: Store = Depends(get_store),
    auth: AuthContext = Depends(require_student),
):
    _ensure_owner(auth, student_id, "add")
    student_id = parse_student_id(student_id)
    course_id = parse_enrollment_body(body).course_id

    enr = enrollment_crud.enroll(store, student_id=student_id, course_id=course_id)
    if enr is None:
        raise Conflict(f"Course {course_id} already registered for student {student_id}")
    return envelope(f"Course {course_id} added for student {student_id}", enr.to_json())

@router.delete("/{student_id}")
def drop_course(
    student_id: str = Path(...),
    body: Optional[Dict[str, Any]] = Body(None),
    store: Store = Depends(get_store),
    auth: AuthContext = Depends(require_student),
):
    _ensure_owner(auth, student_id, "drop")
    student_id = parse_student_id(student_id)
    course_id = parse_enrollment_body(body).course_id

    remaining = enrollment_crud.drop(store, student_id=student_id, course_id=course_id)
    if remaining is None:
        raise NotFound(f"Course {course_id} not found for student {student_id}")
    return envelope(
        f"Course {course_id} dropped for student {student_id}",
        [e.to_json() for e in remaining],
    )
