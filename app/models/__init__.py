from app.models.student import Student
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.user import User, Role

__all__ = ["Student", "Course", "Enrollment", "User", "Role"]
