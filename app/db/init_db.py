# app/db/init_db.py
import copy
from functools import lru_cache
from typing import List

from app.core.security_password import hash_password
from app.models import Course, Enrollment, Role, Student, User

# Estado inicial do banco em memória; cada chamada devolve cópias novas.

_STUDENTS = [
    {"studentId": "650610001", "firstName": "Matt", "lastName": "Damon", "program": "CPE",
     "courses": ["261207", "261497"]},
    {"studentId": "650610002", "firstName": "Cillian", "lastName": "Murphy", "program": "CPE",
     "courses": ["261207", "261497"]},
    {"studentId": "650610003", "firstName": "Emily", "lastName": "Blunt", "program": "ISNE",
     "courses": ["269101", "261497"]},
]

_COURSES = [
    {"courseId": "261207", "courseTitle": "Basic Computer Engineering Lab",
     "instructors": ["Dome", "Chanadda"]},
    {"courseId": "261497", "courseTitle": "Full Stack Development",
     "instructors": ["Dome", "Nirand", "Chanadda"]},
    {"courseId": "269101", "courseTitle": "Introduction to Information Systems and Network Engineering",
     "instructors": ["KENNETH COSH"]},
]

_USERS = [
    {"username": "user1@abc.com", "password": "1234", "studentId": None, "role": Role.ADMIN.value},
    {"username": "user2@abc.com", "password": "1234", "studentId": "650610001", "role": Role.STUDENT.value},
    {"username": "user3@abc.com", "password": "1234", "studentId": "650610002", "role": Role.STUDENT.value},
]


@lru_cache(maxsize=None)
def _hashed(plain: str) -> str:
    # argon2 é caro; o seed é recriado a cada reset
    return hash_password(plain)


def seed_students() -> List[Student]:
    return [Student.model_validate(copy.deepcopy(s)) for s in _STUDENTS]


def seed_courses() -> List[Course]:
    return [Course.model_validate(copy.deepcopy(c)) for c in _COURSES]


def seed_enrollments() -> List[Enrollment]:
    return [
        Enrollment(student_id=s["studentId"], course_id=course_id)
        for s in _STUDENTS
        for course_id in s["courses"]
    ]


def seed_users() -> List[User]:
    return [
        User.model_validate({**u, "password": _hashed(u["password"])})
        for u in _USERS
    ]
