from blogapp.models.user import User
from blogapp.models.blog import Blog
from blogapp.models.post import Post
from blogapp.models.comment import Comment

__all__ = ["User", "Blog", "Post", "Comment"]
