"""Shared fixtures: in-memory SQLite, an app wired to it, and a registered author."""

import os

# Configure before bloglist.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bloglist.db.base import Base
from bloglist.db.session import get_db
from bloglist.main import create_app
from bloglist.modules.authors.schemas.author import AuthorCreate
from bloglist.modules.authors.services.author import AuthorRepository, register_author
from bloglist.modules.posts.models.post import Post
from bloglist.modules.posts.services.post import PostRepository

INITIAL_POSTS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def posts(db):
    return PostRepository(db)


@pytest.fixture
def authors(db):
    return AuthorRepository(db)


@pytest.fixture
def app(session_factory):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def root_author(authors):
    return register_author(authors, AuthorCreate(username="root", name="admin", password="sekret"))


@pytest.fixture
def auth_header(client, root_author):
    response = client.post("/api/login", json={"username": "root", "password": "sekret"})
    assert response.status_code == 200
    return {"Authorization": f"bearer {response.json()['token']}"}


@pytest.fixture
def seeded_posts(posts, authors, root_author):
    """INITIAL_POSTS stored as root's posts, with root's post_ids in step"""
    created = []
    for index, fields in enumerate(INITIAL_POSTS):
        post = posts.add(Post(id=f"00000000-0000-4000-8000-00000000000{index}", owner_id=root_author.id, **fields))
        authors.append_post(root_author.id, post.id)
        created.append(post)
    return created


def posts_in_db(db):
    db.expire_all()
    return db.query(Post).all()


def stored_post_ids(db, author_id):
    db.expire_all()
    return AuthorRepository(db).get(author_id).post_ids
