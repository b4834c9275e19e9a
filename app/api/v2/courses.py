# app/api/v2/courses.py
from fastapi import APIRouter, Depends, Path

from app.api.deps import get_store
from app.core.errors import NotFound
from app.core.rbac import require_any_role
from app.crud.course import course_crud
from app.db.store import Store
from app.schemas.course import parse_course_id
from app.schemas.response import envelope

router = APIRouter(dependencies=[Depends(require_any_role)])

@router.get("")
def list_courses(store: Store = Depends(get_store)):
    return envelope("Course Information", [c.to_json() for c in course_crud.get_multi(store)])

@router.get("/{course_id}")
def get_course(course_id: str = Path(...), store: Store = Depends(get_store)):
    course_id = parse_course_id(course_id)
    c = course_crud.get(store, course_id)
    if not c:
        raise NotFound("Course does not exists")
    return envelope("Course Information", c.to_json())
