"""Pytest fixtures for wedding backend tests."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from wedding.main import app
from wedding.database import Base, get_db, configure_sqlite
from wedding.services.auth import AuthService
import wedding.models  # noqa: F401

# In-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
configure_sqlite(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with the test database."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_party(db):
    """Create a test party."""
    auth = AuthService(db)
    return auth.create_party("234", max_person_count=2)


@pytest.fixture
def test_user(db, test_party):
    """Create a test user with a password."""
    auth = AuthService(db)
    return auth.create_user(test_party, "username", "testpass")


@pytest.fixture
def other_user(db):
    """Create a user in another party."""
    auth = AuthService(db)
    party = auth.create_party("567", max_person_count=4)
    return auth.create_user(party, "otheruser")


@pytest.fixture
def auth_headers(db, test_user):
    """Get authorization headers for test user."""
    auth = AuthService(db)
    token = auth.create_token(test_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(db, other_user):
    """Get authorization headers for the other user."""
    auth = AuthService(db)
    token = auth.create_token(other_user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def associate(db):
    """Factory: insert a user's association row directly."""
    def _associate(kind, user_id, target_id):
        db.execute(
            insert(kind.association).values(user_id=user_id, **{kind.target_column: target_id})
        )
        db.commit()

    return _associate


@pytest.fixture
def requested_artist(db):
    """Create a requested artist with no associations."""
    from wedding.models.music_request import RequestedArtist
    artist = RequestedArtist(name="artistName", url="artistUrl", image_url="imageUrl")
    db.add(artist)
    db.commit()
    db.refresh(artist)
    return artist


@pytest.fixture
def requested_album(db, requested_artist):
    """Create a requested album by the requested artist."""
    from wedding.models.music_request import RequestedAlbum
    album = RequestedAlbum(
        name="albumName",
        url="albumUrl",
        image_url="albumImageUrl",
        artist_id=requested_artist.id,
    )
    db.add(album)
    db.commit()
    db.refresh(album)
    return album


@pytest.fixture
def requested_song(db, requested_artist):
    """Create a requested song by the requested artist."""
    from wedding.models.music_request import RequestedSong
    song = RequestedSong(name="songName", url="songUrl", artist_id=requested_artist.id)
    db.add(song)
    db.commit()
    db.refresh(song)
    return song
