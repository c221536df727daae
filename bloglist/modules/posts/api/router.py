from typing import Any, List, Optional
import logging

from fastapi import APIRouter, Depends, Response, status

from bloglist.core.identifiers import ensure_valid_id
from bloglist.core.errors import NotFound
from bloglist.deps import (
    get_author_repository, get_post_mutation_service, get_post_repository, oauth2_scheme,
)
from bloglist.modules.authors.services.author import AuthorRepository
from bloglist.modules.posts.schemas.post import Post as PostSchema, PostCreate, PostUpdate, PostWithOwner
from bloglist.modules.posts.services.mutation import PostMutationService
from bloglist.modules.posts.services.post import PostRepository, list_posts_with_owners

logger = logging.getLogger("bloglist")

router = APIRouter(prefix="")

@router.get("/", response_model=List[PostWithOwner])
@router.get("", response_model=List[PostWithOwner])
def read_posts(
    posts: PostRepository = Depends(get_post_repository),
    authors: AuthorRepository = Depends(get_author_repository),
) -> Any:
    """
    Retrieve all posts, each with its owner's username and name.
    """
    return list_posts_with_owners(posts, authors)

@router.post("/", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    post_in: PostCreate,
    token: Optional[str] = Depends(oauth2_scheme),
    service: PostMutationService = Depends(get_post_mutation_service),
) -> Any:
    """
    Create a post owned by the author the bearer token belongs to.
    """
    return PostSchema.model_validate(service.create(token, post_in))

@router.get("/{post_id}", response_model=PostSchema)
def read_post_by_id(
    *,
    post_id: str,
    posts: PostRepository = Depends(get_post_repository),
) -> Any:
    """
    Get post by ID.
    """
    post = posts.get(ensure_valid_id(post_id))
    if not post:
        raise NotFound("Post", post_id)
    return PostSchema.model_validate(post)

@router.put("/{post_id}", response_model=PostSchema)
def update_post_by_id(
    *,
    post_id: str,
    post_in: PostUpdate,
    service: PostMutationService = Depends(get_post_mutation_service),
) -> Any:
    """
    Update title, author, url or likes of a post. Open to any caller;
    empty or zero values leave the field unchanged.
    """
    return PostSchema.model_validate(service.update(post_id, post_in))

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post_by_id(
    *,
    post_id: str,
    token: Optional[str] = Depends(oauth2_scheme),
    service: PostMutationService = Depends(get_post_mutation_service),
) -> Response:
    """
    Delete a post. Only the author who created it may do so.
    """
    service.delete(token, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
