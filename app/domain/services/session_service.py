import logging
from typing import Optional

from app.domain.entities.user import User
from app.domain.errors import LoginError

logger = logging.getLogger(__name__)


class SessionService:
    """
    Sesión de un único usuario.
    No hay autenticación real: el login solo valida el formato y crea el User.
    """

    def __init__(self):
        self.current_user: Optional[User] = None

    def login(self, email: str, password: str) -> User:
        """
        Abre la sesión.

        Raises:
            LoginError: Campos vacíos o email sin '@' / '.'
        """
        email = (email or "").strip()
        password = (password or "").strip()

        if not email or not password:
            raise LoginError("Please fill in all fields")

        if "@" not in email or "." not in email:
            raise LoginError("Please enter a valid email address")

        self.current_user = User(email=email, password=password)
        logger.info(f"👤 Sesión iniciada: {self.current_user.nickname}")
        return self.current_user

    def logout(self) -> None:
        if self.current_user is not None:
            logger.info(f"👋 Sesión cerrada: {self.current_user.nickname}")
        self.current_user = None

    def is_authenticated(self) -> bool:
        return self.current_user is not None
