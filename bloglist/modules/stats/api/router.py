from typing import Any, Dict

from fastapi import APIRouter, Depends

from bloglist.deps import get_post_repository
from bloglist.modules.posts.services.post import PostRepository
from bloglist.modules.stats.services.stats import summarize

router = APIRouter()

@router.get("", response_model=Dict[str, Any])
def read_stats(posts: PostRepository = Depends(get_post_repository)) -> Any:
    """Total likes, favorite post and top authors over all posts"""
    return summarize(posts.list())
