from app.crud.base import CRUDBase
from app.models import User

user_crud = CRUDBase[User]("users", key=lambda u: u.username)
