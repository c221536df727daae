from typing import TYPE_CHECKING, Iterable, List, Optional
import logging

from sqlalchemy.orm import Session

from bloglist.modules.posts.models.post import Post
from bloglist.modules.posts.schemas.post import OwnerSummary, PostWithOwner

if TYPE_CHECKING:
    from bloglist.modules.authors.services.author import AuthorRepository

logger = logging.getLogger("bloglist")

class PostRepository:
    """CRUD-by-id and full-scan access to post records.

    Every write commits on its own. A failed write is rolled back before the
    exception propagates, so the session stays usable by the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, post_id: str) -> Optional[Post]:
        """Get post by ID"""
        return self.db.query(Post).filter(Post.id == post_id).first()

    def list(self) -> List[Post]:
        """Get all posts, oldest first"""
        return self.db.query(Post).order_by(Post.created_at, Post.id).all()

    def list_by_ids(self, post_ids: Iterable[str]) -> List[Post]:
        """Get posts for the given ids, in the order of the ids"""
        post_ids = list(post_ids)
        if not post_ids:
            return []
        found = {post.id: post for post in self.db.query(Post).filter(Post.id.in_(post_ids)).all()}
        return [found[post_id] for post_id in post_ids if post_id in found]

    def add(self, post: Post) -> Post:
        logger.debug(f"Inserting post {post.id}")
        self.db.add(post)
        self._commit()
        self.db.refresh(post)
        return post

    def save(self, post: Post) -> Post:
        self._commit()
        self.db.refresh(post)
        return post

    def delete(self, post: Post) -> None:
        logger.debug(f"Deleting post {post.id}")
        self.db.delete(post)
        self._commit()

    def count(self) -> int:
        return self.db.query(Post).count()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


def list_posts_with_owners(posts: PostRepository, authors: "AuthorRepository") -> List[PostWithOwner]:
    """All posts with username and name of the owning author embedded"""
    owners = {author.id: author for author in authors.list()}
    result = []
    for post in posts.list():
        item = PostWithOwner.model_validate(post)
        owner = owners.get(post.owner_id)
        if owner is not None:
            item.owner = OwnerSummary.model_validate(owner)
        result.append(item)
    return result
