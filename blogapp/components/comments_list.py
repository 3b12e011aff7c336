"""Comments of one post followed by an editor for a new comment."""
import logging

from sqlalchemy.orm import Session

from blogapp.components.comment_editor import CommentEditor
from blogapp.components.comment_item import CommentItem
from blogapp.components.state import CommentsListState, Draft, KeyDown, Saved, initial_state, transition
from blogapp.models.comment import Comment
from blogapp.services import store
from blogapp.templating import render_fragment

logger = logging.getLogger(__name__)


class CommentsList:
    def __init__(self, db: Session, post_id: int, state: CommentsListState | None = None):
        self.db = db
        self.post_id = post_id
        self.state = state or initial_state(post_id)

    @property
    def draft(self) -> Draft:
        return self.state.draft

    def editor(self) -> CommentEditor:
        return CommentEditor(self.db, self.state.draft)

    def dispatch(self, event: KeyDown | Saved) -> CommentsListState:
        """Feed one event through the editor and apply the resulting transition."""
        if isinstance(event, KeyDown):
            saved = self.editor().handle_key_down(event)
            if saved is None:
                return self.state
            event = saved
        if isinstance(event, Saved):
            logger.debug("Comment %s saved; resetting draft for post %s", event.comment_id, self.post_id)
        self.state = transition(self.state, event)
        return self.state

    def comments(self) -> list[Comment]:
        return store.list_comments_for_post(self.db, self.post_id)

    def render(self) -> str:
        items = [CommentItem(comment).render() for comment in self.comments()]
        return render_fragment(
            "components/comments_list.html",
            post_id=self.post_id,
            items=items,
            editor=self.editor().render(),
        )
