from datetime import timezone

from sqlalchemy.orm import Session

from postwall.models.post import PostRow
from postwall.services.store_errors import store_errors
from postwall.storage.base import ContentStore, NewPost, Post


def _to_record(row: PostRow) -> Post:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Post(
        id=row.id,
        title=row.title,
        content=row.content,
        user_email=row.user_email,
        username=row.username,
        created_at=created_at,
    )


class PostService(ContentStore):
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Post]:
        with store_errors("posts.list"):
            rows = self.db.query(PostRow).order_by(PostRow.created_at.desc(), PostRow.id.desc()).all()
        return [_to_record(row) for row in rows]

    def get(self, post_id: str) -> Post | None:
        with store_errors("posts.get"):
            row = self.db.query(PostRow).filter(PostRow.id == post_id).one_or_none()
        return _to_record(row) if row is not None else None

    def add(self, post: NewPost) -> str:
        row = PostRow(
            title=post.title,
            content=post.content,
            user_email=post.user_email,
            username=post.username,
            created_at=post.created_at,
        )
        with store_errors("posts.add"):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return row.id
