# app/db/store.py
from __future__ import annotations

import logging
import threading
from typing import List

from app.db.init_db import seed_courses, seed_enrollments, seed_students, seed_users
from app.models import Course, Enrollment, Student, User

logger = logging.getLogger(__name__)


class Store:
    """
    Banco em memória do processo: students, courses, enrollments e users.

    O FastAPI executa rotas síncronas num threadpool; toda leitura-escrita
    composta deve acontecer dentro de `with store.lock`.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.students: List[Student] = []
        self.courses: List[Course] = []
        self.enrollments: List[Enrollment] = []
        self.users: List[User] = []
        self.reset()

    # ---------- reset ----------
    def reset_db(self) -> None:
        with self.lock:
            self.students = []
            self.courses = []
            self.enrollments = []
            self.users = []

    def reset_courses(self) -> None:
        with self.lock:
            self.courses = seed_courses()

    def reset_enrollments(self) -> None:
        with self.lock:
            self.enrollments = seed_enrollments()

    def reset_students(self) -> None:
        with self.lock:
            self.students = seed_students()

    def reset_users(self) -> None:
        with self.lock:
            self.users = seed_users()

    def reset(self) -> None:
        # ordem fixa; o lock torna o reset atômico para outras requisições
        with self.lock:
            self.reset_db()
            self.reset_courses()
            self.reset_enrollments()
            self.reset_students()
            self.reset_users()
        logger.info("in-memory database reset to seed state")
