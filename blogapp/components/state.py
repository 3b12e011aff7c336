"""Comment draft state and the events that drive it.

The list component holds one CommentsListState. Only a Saved event replaces it,
swapping the draft for a fresh empty one on the same post.
"""
from dataclasses import dataclass, replace

ENTER_KEY_CODE = 13


@dataclass(frozen=True)
class Draft:
    post_id: int
    body: str = ""
    comment_id: int | None = None


@dataclass(frozen=True)
class KeyDown:
    key_code: int
    value: str = ""


@dataclass(frozen=True)
class Saved:
    comment_id: int


@dataclass(frozen=True)
class CommentsListState:
    post_id: int
    draft: Draft


def new_draft(post_id: int) -> Draft:
    return Draft(post_id=post_id)


def initial_state(post_id: int) -> CommentsListState:
    return CommentsListState(post_id=post_id, draft=new_draft(post_id))


def transition(state: CommentsListState, event) -> CommentsListState:
    if isinstance(event, Saved):
        return replace(state, draft=new_draft(state.post_id))
    return state
