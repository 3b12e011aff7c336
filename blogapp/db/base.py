"""SQLAlchemy declarative base and model imports for Alembic."""
from blogapp.db.session import Base

# Import all models so Alembic can see them
from blogapp.models.blog import Blog  # noqa: F401
from blogapp.models.comment import Comment  # noqa: F401
from blogapp.models.post import Post  # noqa: F401
from blogapp.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Blog", "Post", "Comment"]
