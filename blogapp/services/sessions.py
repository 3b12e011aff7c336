"""Login check for the session lifecycle.

Unknown email and wrong password both yield None so callers cannot tell them apart.
"""
import logging

from sqlalchemy.orm import Session

from blogapp.core import security
from blogapp.models.user import User
from blogapp.services import store

logger = logging.getLogger(__name__)


def create(db: Session, email: str | None, password: str | None) -> User | None:
    """Return the user when the credentials match; None otherwise."""
    user = store.find_user_by_email(db, email)
    if user is None:
        # Unknown emails cost one hash verification, same as a wrong password
        security.pwd_context.dummy_verify()
        logger.info("Login failed")
        return None
    if not store.verify_password(user, password or ""):
        logger.info("Login failed")
        return None
    logger.info("Login succeeded for user %s", user.id)
    return user
