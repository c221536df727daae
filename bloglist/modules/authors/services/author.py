from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bloglist.core.config import settings
from bloglist.core.errors import ConflictError, ValidationError
from bloglist.core.identifiers import new_id
from bloglist.core.security import get_password_hash
from bloglist.modules.authors.models.author import Author
from bloglist.modules.authors.schemas.author import Author as AuthorSchema, AuthorCreate, PostSummary
from bloglist.modules.posts.services.post import PostRepository

logger = logging.getLogger("bloglist")

USERNAME_TAKEN = "expected `username` to be unique"

class AuthorRepository:
    """CRUD-by-id and full-scan access to author records, including post_ids.

    Writes commit individually and roll back on failure, like PostRepository.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, author_id: str) -> Optional[Author]:
        """Get author by ID"""
        return self.db.query(Author).filter(Author.id == author_id).first()

    def get_by_username(self, username: str) -> Optional[Author]:
        """Get author by username"""
        return self.db.query(Author).filter(Author.username == username).first()

    def list(self) -> List[Author]:
        """Get all authors"""
        return self.db.query(Author).order_by(Author.created_at, Author.id).all()

    def add(self, author: Author) -> Author:
        self.db.add(author)
        self._commit()
        self.db.refresh(author)
        return author

    def append_post(self, author_id: str, post_id: str) -> Author:
        """Add post_id to the author's post_ids, reading the latest stored list first"""
        author = self._load_fresh(author_id)
        if post_id not in author.post_ids:
            # Reassign so the JSON column is flagged dirty
            author.post_ids = [*author.post_ids, post_id]
        self._commit()
        return author

    def remove_post(self, author_id: str, post_id: str) -> Author:
        """Drop post_id from the author's post_ids, reading the latest stored list first"""
        author = self._load_fresh(author_id)
        author.post_ids = [pid for pid in author.post_ids if pid != post_id]
        self._commit()
        return author

    def count(self) -> int:
        return self.db.query(Author).count()

    def _load_fresh(self, author_id: str) -> Author:
        author = self.get(author_id)
        if author is None:
            raise LookupError(f"Author {author_id} no longer exists")
        self.db.refresh(author)
        return author

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


def register_author(authors: AuthorRepository, author_in: AuthorCreate) -> Author:
    """Create a new author after checking the password, username length and uniqueness"""
    # Only the hash is stored, so password length can only be checked here
    if not author_in.password or len(author_in.password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(f"password must be at least {settings.PASSWORD_MIN_LENGTH} characters long")
    if not author_in.username:
        raise ValidationError("`username` is required")
    if len(author_in.username) < settings.USERNAME_MIN_LENGTH:
        raise ValidationError(f"username must be at least {settings.USERNAME_MIN_LENGTH} characters long")
    if authors.get_by_username(author_in.username) is not None:
        logger.warning(f"Registration rejected, username {author_in.username} is taken")
        raise ConflictError(USERNAME_TAKEN)

    author = Author(
        id=new_id(),
        username=author_in.username,
        name=author_in.name,
        password_hash=get_password_hash(author_in.password),
        post_ids=[],
    )
    try:
        author = authors.add(author)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same username
        raise ConflictError(USERNAME_TAKEN)

    logger.info(f"Registered author {author.username} with ID: {author.id}")
    return author


def to_public_author(author: Author, posts: PostRepository) -> AuthorSchema:
    """Author with the title/author/url projection of the posts it owns"""
    return AuthorSchema(
        id=author.id,
        username=author.username,
        name=author.name,
        created_at=author.created_at,
        posts=[PostSummary.model_validate(post) for post in posts.list_by_ids(author.post_ids)],
    )


def list_authors(authors: AuthorRepository, posts: PostRepository) -> List[AuthorSchema]:
    return [to_public_author(author, posts) for author in authors.list()]
