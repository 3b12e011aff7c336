"""Single-line editor bound to a comment draft."""
from sqlalchemy.orm import Session

from blogapp.components.state import ENTER_KEY_CODE, Draft, KeyDown, Saved
from blogapp.services import store
from blogapp.templating import render_fragment


class CommentEditor:
    """Commits the draft on Enter; other keys are ignored.

    Whatever text is in the input is stored, including an empty string.
    Store errors propagate and no Saved event is produced.
    """

    def __init__(self, db: Session, draft: Draft):
        self.db = db
        self.draft = draft

    def handle_key_down(self, event: KeyDown) -> Saved | None:
        if event.key_code != ENTER_KEY_CODE:
            return None
        comment = store.create_or_update_comment(
            self.db,
            post_id=self.draft.post_id,
            body=event.value,
            comment_id=self.draft.comment_id,
        )
        return Saved(comment_id=comment.id)

    def render(self) -> str:
        return render_fragment("components/comment_editor.html", draft=self.draft)
