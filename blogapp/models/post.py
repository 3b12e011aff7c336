"""Post model: name and body text inside a blog."""
from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from blogapp.db.session import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=True)
    body = Column(Text, nullable=True)
    blog_id = Column(Integer, ForeignKey("blogs.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    blog = relationship("Blog", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        order_by="Comment.id",
    )
