"""Tests for the aggregate statistics, pure functions over posts."""

from types import SimpleNamespace

import pytest

from bloglist.modules.stats.services.stats import (
    favorite_post, most_likes, most_posts, summarize, total_likes,
)


def make_post(title, author, likes):
    return SimpleNamespace(title=title, author=author, likes=likes)


@pytest.fixture
def blogs():
    return [
        make_post("React patterns", "Michael Chan", 7),
        make_post("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5),
        make_post("Canonical string reduction", "Edsger W. Dijkstra", 12),
        make_post("First class tests", "Robert C. Martin", 10),
        make_post("TDD harms architecture", "Robert C. Martin", 0),
        make_post("Type wars", "Robert C. Martin", 2),
    ]


class TestTotalLikes:

    def test_empty_list_is_zero(self):
        assert total_likes([]) == 0

    def test_single_post_equals_its_likes(self):
        assert total_likes([make_post("React patterns", "Michael Chan", 7)]) == 7

    def test_bigger_list_is_summed(self, blogs):
        assert total_likes(blogs) == 36


class TestFavoritePost:

    def test_empty_list_gives_empty_dict(self):
        assert favorite_post([]) == {}

    def test_picks_most_liked(self, blogs):
        assert favorite_post(blogs) == {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "likes": 12,
        }

    def test_tie_goes_to_first_encountered(self):
        posts = [make_post("first", "A", 3), make_post("second", "B", 3)]
        assert favorite_post(posts)["title"] == "first"


class TestMostPosts:

    def test_empty_list_gives_empty_dict(self):
        assert most_posts([]) == {}

    def test_counts_by_byline(self, blogs):
        assert most_posts(blogs) == {"author": "Robert C. Martin", "posts": 3}

    def test_tie_goes_to_first_byline_seen(self):
        posts = [
            make_post("a", "Second", 1),
            make_post("b", "First", 1),
            make_post("c", "First", 1),
            make_post("d", "Second", 1),
        ]
        assert most_posts(posts) == {"author": "Second", "posts": 2}


class TestMostLikes:

    def test_empty_list_gives_empty_dict(self):
        assert most_likes([]) == {}

    def test_sums_likes_by_byline(self, blogs):
        assert most_likes(blogs) == {"author": "Edsger W. Dijkstra", "likes": 17}

    def test_tie_goes_to_first_byline_seen(self):
        posts = [make_post("a", "Ann", 4), make_post("b", "Bob", 4)]
        assert most_likes(posts) == {"author": "Ann", "likes": 4}


def test_summarize_accepts_a_generator(blogs):
    summary = summarize(post for post in blogs)
    assert summary["total_likes"] == 36
    assert summary["favorite_post"]["likes"] == 12
    assert summary["most_posts"]["author"] == "Robert C. Martin"
    assert summary["most_likes"]["author"] == "Edsger W. Dijkstra"
