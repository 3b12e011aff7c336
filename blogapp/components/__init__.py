from blogapp.components.comment_editor import CommentEditor
from blogapp.components.comment_item import CommentItem
from blogapp.components.comments_list import CommentsList
from blogapp.components.state import (
    ENTER_KEY_CODE,
    CommentsListState,
    Draft,
    KeyDown,
    Saved,
    initial_state,
    new_draft,
    transition,
)

__all__ = [
    "ENTER_KEY_CODE",
    "CommentEditor",
    "CommentItem",
    "CommentsList",
    "CommentsListState",
    "Draft",
    "KeyDown",
    "Saved",
    "initial_state",
    "new_draft",
    "transition",
]
