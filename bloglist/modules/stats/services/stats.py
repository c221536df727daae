"""Summary facts over a collection of posts.

Pure functions, no repository access. Authors are grouped by the free-text
``author`` byline, not by owner. Ties go to whatever was seen first: the first
post with the most likes, or the first byline (in order of first appearance)
reaching the maximum.
"""

from typing import Any, Dict, Iterable, List, Protocol


class PostLike(Protocol):
    title: str
    author: str
    likes: int


def total_likes(posts: Iterable[PostLike]) -> int:
    return sum(post.likes for post in posts)


def favorite_post(posts: Iterable[PostLike]) -> Dict[str, Any]:
    favorite = None
    for post in posts:
        if favorite is None or post.likes > favorite.likes:
            favorite = post
    if favorite is None:
        return {}
    return {"title": favorite.title, "author": favorite.author, "likes": favorite.likes}


def most_posts(posts: Iterable[PostLike]) -> Dict[str, Any]:
    counts: Dict[str, int] = {}
    for post in posts:
        counts[post.author] = counts.get(post.author, 0) + 1
    return _first_max(counts, "posts")


def most_likes(posts: Iterable[PostLike]) -> Dict[str, Any]:
    likes: Dict[str, int] = {}
    for post in posts:
        likes[post.author] = likes.get(post.author, 0) + post.likes
    return _first_max(likes, "likes")


def summarize(posts: Iterable[PostLike]) -> Dict[str, Any]:
    posts = list(posts)
    return {
        "total_likes": total_likes(posts),
        "favorite_post": favorite_post(posts),
        "most_posts": most_posts(posts),
        "most_likes": most_likes(posts),
    }


def _first_max(totals: Dict[str, int], label: str) -> Dict[str, Any]:
    # dicts keep insertion order, so this scans bylines by first appearance
    best: List[Any] = []
    for author, total in totals.items():
        if not best or total > best[1]:
            best = [author, total]
    if not best:
        return {}
    return {"author": best[0], label: best[1]}
