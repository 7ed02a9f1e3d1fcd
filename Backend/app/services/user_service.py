# Backend/app/services/user_service.py

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from Backend.app.exceptions import BusinessRuleError
from Backend.app.models.user_models import ROLES, User
from Backend.app.services.base import CrudService

logger = logging.getLogger(__name__)


def _is_hashed(password):
    # werkzeug hashes look like "scrypt:32768:8:1$salt$hash" / "pbkdf2:sha256:..."
    return '$' in password and password.split(':', 1)[0] in ('scrypt', 'pbkdf2')


class UserService(CrudService):
    """
    Users are stored with a hashed password. `create` and `update` accept a
    clear-text password on the entity and hash it before it reaches the store.
    """
    model = User
    editable_fields = ('username', 'password', 'fullname', 'role')
    default_order = (User.username.asc(),)

    def before_create(self, user):
        self._hash(user)

    def before_update(self, user):
        self._hash(user)

    def _hash(self, user):
        if user.password and not _is_hashed(user.password):
            user.password = generate_password_hash(user.password)

    def validate(self, user):
        if user.role not in ROLES:
            raise BusinessRuleError(f"Role must be one of {', '.join(ROLES)}")
        with self.session.no_autoflush:
            clash = self.find_by_username(user.username)
        if clash is not None and clash.id != user.id:
            raise BusinessRuleError(f"Username '{user.username}' is already taken")

    def find_by_username(self, username):
        if not username:
            return None
        return self.session.query(User).filter_by(username=username.strip()).first()

    def authenticate(self, username, password):
        """Return the matching User, or None when the credentials are wrong."""
        user = self.find_by_username(username)
        if user is None or not password or not check_password_hash(user.password, password):
            logger.warning(f"Failed login attempt for '{username}'")
            return None
        logger.info(f"User '{user.username}' logged in")
        return user
