"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the presentation services and the
Flask application, using the application factory with isolated instances.
"""

import json
import os

import pytest

# Config validates SECRET_KEY at import time
os.environ.setdefault('SECRET_KEY', 'test-secret-key-for-pytest')
os.environ.setdefault('FLASK_ENV', 'testing')


CREATED_AT = '2024-05-20T08:00:00.000Z'


def make_blog_data(**overrides):
    """API-shaped blog record matching the single-blog page fixtures."""
    data = {
        '_id': 'blog123',
        'title': 'Test Blog Post',
        'content': 'This is a test blog post content with enough words to calculate reading time. ' * 50,
        'author': {
            '_id': 'author123',
            'username': 'testauthor',
            'avatar': 'https://example.com/avatar.jpg',
        },
        'tags': ['javascript', 'testing', 'react'],
        'likes': [{'userId': 'user1'}, {'userId': 'user2'}],
        'views': 100,
        'comments': [
            {
                '_id': 'comment1',
                'text': 'Great post!',
                'commentedBy': {
                    '_id': 'commenter1',
                    'username': 'commenter1',
                    'avatar': 'https://example.com/commenter1.jpg',
                },
                'createdAt': CREATED_AT,
            },
            {
                '_id': 'comment2',
                'text': 'Very informative',
                'commentedBy': {
                    '_id': 'commenter2',
                    'username': 'commenter2',
                    'avatar': 'https://example.com/commenter2.jpg',
                },
                'createdAt': CREATED_AT,
            },
        ],
        'createdAt': CREATED_AT,
    }
    data.update(overrides)
    return data


def make_home_blogs():
    """API-shaped records matching the home page fixtures."""
    return [
        {
            '_id': 'blog1',
            'title': 'First Blog Post',
            'content': 'This is the first blog content. ' * 100,
            'author': {'_id': 'author1', 'username': 'author1', 'avatar': 'https://example.com/avatar1.jpg'},
            'tags': ['javascript', 'react'],
            'likes': [{'userId': 'user1'}, {'userId': 'user2'}],
            'views': 150,
            'comments': [{'_id': 'comment1'}],
            'createdAt': CREATED_AT,
        },
        {
            '_id': 'blog2',
            'title': 'Second Blog Post',
            'content': 'This is the second blog content. ' * 50,
            'author': {'_id': 'author2', 'username': 'author2', 'avatar': 'https://example.com/avatar2.jpg'},
            'tags': ['testing'],
            'likes': [{'userId': 'user1'}],
            'views': 75,
            'comments': [],
            'createdAt': CREATED_AT,
        },
    ]


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def blogs_file(tmp_path):
    """JSON blog source holding the single-blog and home page records."""
    path = tmp_path / 'blogs.json'
    path.write_text(json.dumps({'blogs': [make_blog_data()] + make_home_blogs()}), encoding='utf-8')
    return path


def _build_app(test_config, **settings):
    from app import create_app

    config_class = type('ScopedTestingConfig', (test_config,), settings)
    app = create_app(config_class)

    ctx = app.app_context()
    ctx.push()
    return app, ctx


@pytest.fixture
def app(test_config, blogs_file):
    """
    Create a Flask application instance for testing.

    Display mode is kept in the session.
    """
    app, ctx = _build_app(test_config, BLOGS_FILE=blogs_file, DISPLAY_MODE_BACKEND='session')

    yield app

    ctx.pop()


@pytest.fixture
def db_app(test_config, blogs_file):
    """Flask application whose display mode is stored in the database."""
    app, ctx = _build_app(test_config, BLOGS_FILE=blogs_file, DISPLAY_MODE_BACKEND='database')

    yield app

    ctx.pop()


@pytest.fixture
def broken_feed_app(test_config, tmp_path):
    """Flask application whose blog source does not exist."""
    app, ctx = _build_app(test_config, BLOGS_FILE=tmp_path / 'missing.json')

    yield app

    ctx.pop()


@pytest.fixture
def feed_app_factory(test_config, tmp_path):
    """
    Build a Flask application over a custom blog source.

    The factory takes a list of API-shaped records, or raw bytes written
    to the source file as-is.
    """
    contexts = []

    def build(source):
        path = tmp_path / f'source_{len(contexts)}.json'
        if isinstance(source, bytes):
            path.write_bytes(source)
        else:
            path.write_text(json.dumps(source), encoding='utf-8')
        app, ctx = _build_app(test_config, BLOGS_FILE=path)
        contexts.append(ctx)
        return app

    yield build

    for ctx in reversed(contexts):
        ctx.pop()


@pytest.fixture
def client(app):
    """Flask test client for making HTTP requests."""
    return app.test_client()


@pytest.fixture
def blog_service():
    """BlogService with the default 200 words-per-minute reading speed."""
    from services import BlogService
    return BlogService()


@pytest.fixture
def mock_blog_data():
    return make_blog_data()


@pytest.fixture
def mock_blog(mock_blog_data):
    """Blog record parsed from the API shape."""
    from models import BlogRecord
    return BlogRecord.from_dict(mock_blog_data)


@pytest.fixture
def home_blogs():
    from models import BlogRecord
    return [BlogRecord.from_dict(data) for data in make_home_blogs()]


@pytest.fixture
def memory_storage():
    from services import InMemoryStorage
    return InMemoryStorage()


@pytest.fixture
def failing_storage():
    """Storage whose every read and write fails."""
    from services import StorageUnavailable

    class FailingStorage:
        def get(self, key):
            raise StorageUnavailable("storage disabled")

        def set(self, key, value):
            raise StorageUnavailable("storage disabled")

    return FailingStorage()
