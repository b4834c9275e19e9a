from app.crud.base import CRUDBase
from app.models import Course

course_crud = CRUDBase[Course]("courses", key=lambda c: c.course_id)
