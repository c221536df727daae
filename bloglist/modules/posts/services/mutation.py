"""Post create/update/delete with identity and ownership checks.

Invariants:
    - A post's owner_id is the id resolved from the creating request's token
      and never changes afterwards.
    - At rest, author.post_ids holds exactly the ids of the posts that author owns.
      The post row and the author row are written separately, so each pair of
      writes runs under the author's lock and a failed second write is undone
      on the post side before ConsistencyError is raised.
    - Update checks neither identity nor ownership, and only applies truthy
      fields (an explicit likes=0 leaves likes unchanged).
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from sqlalchemy.orm.exc import StaleDataError

from bloglist.core.errors import ConsistencyError, NotFound, Unauthorized, ValidationError
from bloglist.core.identifiers import ensure_valid_id, new_id
from bloglist.modules.auth.services.auth import resolve_identity
from bloglist.modules.authors.services.author import AuthorRepository
from bloglist.modules.posts.models.post import Post
from bloglist.modules.posts.schemas.post import PostCreate, PostUpdate
from bloglist.modules.posts.services.post import PostRepository

logger = logging.getLogger("bloglist")

NOT_CREATOR = "a blog can only be deleted by it's creator"
EDITABLE_FIELDS = ("title", "author", "url", "likes")


class AuthorLocks:
    """One lock per author id, serializing read-modify-write of post_ids.

    Shared by all requests of one application instance. An entry only lives
    while some request holds or waits for it, so the registry stays as small
    as the number of authors currently writing.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # author id -> [lock, number of holders and waiters]
        self._locks: Dict[str, List] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def for_author(self, author_id: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(author_id, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[author_id]


class PostMutationService:

    def __init__(self, posts: PostRepository, authors: AuthorRepository, locks: AuthorLocks):
        self.posts = posts
        self.authors = authors
        self.locks = locks

    def create(self, raw_token: Optional[str], post_in: PostCreate) -> Post:
        author_id = resolve_identity(raw_token)

        author = self.authors.get(author_id)
        if author is None:
            logger.warning(f"Creating post for author {author_id} which has no author record")

        if not post_in.title:
            raise ValidationError("`title` is required")
        if not post_in.url:
            raise ValidationError("`url` is required")

        post = Post(
            id=new_id(),
            title=post_in.title,
            author=post_in.author or "unknown",
            url=post_in.url,
            likes=post_in.likes or 0,
            owner_id=author_id,
        )

        if author is None:
            return self.posts.add(post)

        with self.locks.for_author(author_id):
            self.posts.add(post)
            try:
                self.authors.append_post(author_id, post.id)
            except Exception as e:
                self._undo_create(post, author_id, e)

        logger.info(f"Author {author_id} created post {post.id}")
        return post

    def update(self, post_id: str, edits: PostUpdate) -> Post:
        ensure_valid_id(post_id)
        post = self.posts.get(post_id)
        if post is None:
            raise NotFound("Post", post_id)

        for field in EDITABLE_FIELDS:
            value = getattr(edits, field)
            if value:
                setattr(post, field, value)

        try:
            post = self.posts.save(post)
        except StaleDataError:
            # Deleted by another request after it was read above
            raise NotFound("Post", post_id)

        logger.info(f"Updated post {post_id}")
        return post

    def delete(self, raw_token: Optional[str], post_id: str) -> None:
        author_id = resolve_identity(raw_token)
        ensure_valid_id(post_id)

        with self.locks.for_author(author_id):
            author = self.authors.get(author_id)
            post = self.posts.get(post_id)
            if author is None or post is None or post.owner_id != author.id:
                logger.warning(f"Author {author_id} may not delete post {post_id}")
                raise Unauthorized(NOT_CREATOR)

            snapshot = _snapshot(post)
            self.posts.delete(post)
            try:
                self.authors.remove_post(author_id, post_id)
            except Exception as e:
                self._undo_delete(snapshot, author_id, e)

        logger.info(f"Author {author_id} deleted post {post_id}")

    def _undo_create(self, post: Post, author_id: str, cause: Exception) -> None:
        logger.error(f"Linking post {post.id} to author {author_id} failed: {cause}")
        try:
            self.posts.delete(post)
        except Exception as e:
            raise ConsistencyError(
                f"post {post.id} was saved but could not be linked to its author "
                f"({cause}) nor removed again ({e})"
            ) from cause
        raise ConsistencyError(
            f"post could not be linked to its author and was not saved ({cause})"
        ) from cause

    def _undo_delete(self, snapshot: dict, author_id: str, cause: Exception) -> None:
        post_id = snapshot["id"]
        logger.error(f"Unlinking post {post_id} from author {author_id} failed: {cause}")
        try:
            self.posts.add(Post(**snapshot))
        except Exception as e:
            raise ConsistencyError(
                f"post {post_id} was deleted but is still listed by its author "
                f"({cause}) and could not be restored ({e})"
            ) from cause
        raise ConsistencyError(
            f"post {post_id} could not be unlinked from its author and was restored ({cause})"
        ) from cause


def _snapshot(post: Post) -> dict:
    return {
        "id": post.id,
        "title": post.title,
        "author": post.author,
        "url": post.url,
        "likes": post.likes,
        "owner_id": post.owner_id,
        "created_at": post.created_at,
    }
