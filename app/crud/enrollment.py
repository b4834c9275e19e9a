import logging
from typing import List, Optional

from app.crud.base import CRUDBase
from app.db.store import Store
from app.models import Enrollment

logger = logging.getLogger(__name__)


class CRUDEnrollment(CRUDBase[Enrollment]):
    def find_index(self, store: Store, *, student_id: str, course_id: str) -> int:
        with store.lock:
            for idx, e in enumerate(store.enrollments):
                if e.matches(student_id, course_id):
                    return idx
            return -1

    def for_student(self, store: Store, student_id: str) -> List[Enrollment]:
        with store.lock:
            return [e for e in store.enrollments if e.student_id == student_id]

    def enroll(self, store: Store, *, student_id: str, course_id: str) -> Optional[Enrollment]:
        """Cria a matrícula; retorna None se o par (student, course) já existe."""
        with store.lock:
            if self.find_index(store, student_id=student_id, course_id=course_id) != -1:
                return None
            enr = Enrollment(student_id=student_id, course_id=course_id)
            store.enrollments.append(enr)
            student = next((s for s in store.students if s.student_id == student_id), None)
            if student is not None and course_id not in student.courses:
                student.courses.append(course_id)
        logger.info("enrolled student=%s course=%s", student_id, course_id)
        return enr

    def drop(self, store: Store, *, student_id: str, course_id: str) -> Optional[List[Enrollment]]:
        """Remove a primeira matrícula do par; None se não existe. Retorna as restantes do aluno."""
        with store.lock:
            idx = self.find_index(store, student_id=student_id, course_id=course_id)
            if idx == -1:
                return None
            del store.enrollments[idx]
            student = next((s for s in store.students if s.student_id == student_id), None)
            if student is not None and course_id in student.courses:
                student.courses.remove(course_id)
            remaining = self.for_student(store, student_id)
        logger.info("dropped student=%s course=%s", student_id, course_id)
        return remaining


enrollment_crud = CRUDEnrollment("enrollments", key=lambda e: (e.student_id, e.course_id))
