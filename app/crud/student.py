from app.crud.base import CRUDBase
from app.models import Student

student_crud = CRUDBase[Student]("students", key=lambda s: s.student_id)
