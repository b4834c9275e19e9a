# app/api/v2/router.py
from fastapi import APIRouter
from app.api.v2 import courses, students, users

api_router = APIRouter()

api_router.include_router(users.router,    prefix="/users",    tags=["users"])
api_router.include_router(students.router, prefix="/students", tags=["students"])
api_router.include_router(courses.router,  prefix="/courses",  tags=["courses"])
