import datetime

import pytest

from app import create_app
from database import SessionLocal
from models.post import Post
from post_presenter import PostPresenter
from post_store import PostStore
from settings import ForumSettings


@pytest.fixture
def app(tmp_path):
    settings = ForumSettings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        secret_key="test",
        log_level="DEBUG",
    )
    app = create_app(settings)
    app.config['TESTING'] = True
    yield app
    app.extensions['threadboard_engine'].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return PostStore(db)


@pytest.fixture
def presenter(store):
    return PostPresenter(store)


@pytest.fixture
def make_post(db):
    """Inserts a post directly, with created_at counted in minutes from a fixed start."""
    start = datetime.datetime(2024, 1, 1, 12, 0, 0)

    def _make_post(poster_name, content, reply_to=None, minute=0):
        post = Post(
            poster_name=poster_name,
            content=content,
            reply_to_id=reply_to.id if reply_to is not None else None,
            created_at=start + datetime.timedelta(minutes=minute),
        )
        db.add(post)
        db.commit()
        return post

    return _make_post
