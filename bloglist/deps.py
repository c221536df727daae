
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bloglist.core.config import settings
from bloglist.db.session import get_db
from bloglist.modules.authors.services.author import AuthorRepository
from bloglist.modules.posts.services.mutation import AuthorLocks, PostMutationService
from bloglist.modules.posts.services.post import PostRepository

# Reads "Authorization: bearer <token>"; a missing header yields None so the
# mutation service can answer with its own 401
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/login", auto_error=False)

def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)

def get_author_repository(db: Session = Depends(get_db)) -> AuthorRepository:
    return AuthorRepository(db)

def get_author_locks(request: Request) -> AuthorLocks:
    """Per-application lock registry, created at startup in main.py"""
    return request.app.state.author_locks

def get_post_mutation_service(
    posts: PostRepository = Depends(get_post_repository),
    authors: AuthorRepository = Depends(get_author_repository),
    locks: AuthorLocks = Depends(get_author_locks),
) -> PostMutationService:
    return PostMutationService(posts, authors, locks)
