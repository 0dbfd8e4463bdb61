# lending/sa/repositories/user.py
from typing import Optional
from lending.sa.models import User
from .base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address.

        Args:
            email: The email to search for

        Returns:
            The User object if found, None otherwise
        """
        return self.session.query(User).filter(User.email == email).first()
