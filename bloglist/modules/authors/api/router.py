from typing import Any, List
import logging

from fastapi import APIRouter, Depends

from bloglist.core.errors import NotFound
from bloglist.core.identifiers import ensure_valid_id
from bloglist.deps import get_author_repository, get_post_repository
from bloglist.modules.authors.schemas.author import Author as AuthorSchema, AuthorCreate
from bloglist.modules.authors.services.author import (
    AuthorRepository, list_authors, register_author, to_public_author,
)
from bloglist.modules.posts.services.post import PostRepository

router = APIRouter()
logger = logging.getLogger("bloglist")

@router.get("/", response_model=List[AuthorSchema])
@router.get("", response_model=List[AuthorSchema])
def read_authors(
    authors: AuthorRepository = Depends(get_author_repository),
    posts: PostRepository = Depends(get_post_repository),
) -> Any:
    """List authors with the title, author and url of the posts they own"""
    return list_authors(authors, posts)

@router.post("/", response_model=AuthorSchema)
@router.post("", response_model=AuthorSchema)
def create_author(
    *,
    author_in: AuthorCreate,
    authors: AuthorRepository = Depends(get_author_repository),
    posts: PostRepository = Depends(get_post_repository),
) -> Any:
    """Register a new author"""
    author = register_author(authors, author_in)
    return to_public_author(author, posts)

@router.get("/{author_id}", response_model=AuthorSchema)
def read_author_by_id(
    author_id: str,
    authors: AuthorRepository = Depends(get_author_repository),
    posts: PostRepository = Depends(get_post_repository),
) -> Any:
    """Get a specific author by ID"""
    author = authors.get(ensure_valid_id(author_id))
    if not author:
        raise NotFound("Author", author_id)
    return to_public_author(author, posts)
