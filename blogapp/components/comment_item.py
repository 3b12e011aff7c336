"""Read-only rendering of one saved comment."""
from blogapp.models.comment import Comment
from blogapp.templating import render_fragment


class CommentItem:
    def __init__(self, comment: Comment):
        self.comment = comment

    def render(self) -> str:
        created_at = self.comment.created_at
        return render_fragment(
            "components/comment_item.html",
            comment=self.comment,
            body=self.comment.body or "",
            created_at="" if created_at is None else str(created_at),
        )
