import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blogsphere.config import Settings, get_settings
from blogsphere.database import Base, enable_sqlite_foreign_keys, get_db, init_db
from blogsphere.main import app
from blogsphere.services.media import UploadFailed, get_media_uploader

TEST_SECRET = "blogsphere-test-secret-0123456789abcdef"
FAKE_MEDIA_URL = "https://res.cloudinary.com/demo/image/upload/sample.jpg"


class FakeUploader:
    def __init__(self):
        self.calls = []
        self.fail = False

    def upload(self, source):
        self.calls.append(source)
        if self.fail:
            raise UploadFailed("provider unavailable")
        return FAKE_MEDIA_URL


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, database_url="sqlite://")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def client(engine, settings, uploader):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_media_uploader] = lambda: uploader
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup(client, name="Luke Skywalker", email="lukeskywalker@gmail.com", password="12345678"):
    response = client.post("/api/v1/signup", json={"name": name, "email": email, "password": password})
    assert response.status_code == 200
    return response.json()["data"]


def login_headers(client, email="lukeskywalker@gmail.com", password="12345678"):
    response = client.post("/api/v1/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def create_blog(client, headers, **fields):
    form = {
        "title": "This is the blog title",
        "body": "This is the blog sample body...",
        "category": "blockchain",
        "filePath": "http://example.com/image.jpg",
    }
    form.update(fields)
    response = client.post("/api/v1/uploadblog", data=form, headers=headers)
    assert response.status_code == 200, response.json()
    return response.json()["data"]


@pytest.fixture
def user(client):
    return signup(client)


@pytest.fixture
def auth_headers(client, user):
    return login_headers(client)


@pytest.fixture
def blog(client, auth_headers):
    return create_blog(client, auth_headers)
