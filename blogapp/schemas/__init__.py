from blogapp.schemas.blog import (
    BlogCreateSchema,
    BlogOutSchema,
    BlogUpdateSchema,
    PostCreateSchema,
    PostOutSchema,
    PostUpdateSchema,
)
from blogapp.schemas.comment import (
    CommentCreateSchema,
    CommentOutSchema,
    CommentUpdateSchema,
    KeyDownEventSchema,
)
from blogapp.schemas.user import SessionOutSchema, UserCreateSchema, UserOutSchema

__all__ = [
    "BlogCreateSchema",
    "BlogOutSchema",
    "BlogUpdateSchema",
    "CommentCreateSchema",
    "CommentOutSchema",
    "CommentUpdateSchema",
    "KeyDownEventSchema",
    "PostCreateSchema",
    "PostOutSchema",
    "PostUpdateSchema",
    "SessionOutSchema",
    "UserCreateSchema",
    "UserOutSchema",
]
