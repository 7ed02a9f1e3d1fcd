# Backend/app/routes/users.py

from Backend.app.mappers import user_mapper
from Backend.app.routes.crud import CrudViews
from Backend.app.schemas import UserForm


def create_user_bp(service):
    """User management: every /user/* route is restricted to ADMIN sessions."""
    return CrudViews('user', service, user_mapper, UserForm, label="User", admin_only=True).blueprint
