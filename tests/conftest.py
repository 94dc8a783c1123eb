import pytest

from app import create_app
from models import db

TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret",
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "MAIL_HOST": None,
    "MAIL_PORT": None,
    "MAIL_USER": None,
    "MAIL_PASSWORD": None,
    "MAIL_FROM": None,
}

MAIL_CONFIG = {
    "MAIL_HOST": "smtp.example.com",
    "MAIL_PORT": "587",
    "MAIL_USER": "mailer",
    "MAIL_PASSWORD": "mail-pass",
    "MAIL_FROM": "noreply@womencare.test",
}


def build_app(**overrides):
    app = create_app({**TEST_CONFIG, **overrides})
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app():
    yield from build_app()


@pytest.fixture
def mail_app():
    yield from build_app(**MAIL_CONFIG)


@pytest.fixture
def unseeded_app():
    yield from build_app(SEED_LABS=False)


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Sign up and log in through the HTTP surface; returns the login response."""
    def _login(email="jane@example.com", password="s3cret-pass", name="Jane Doe"):
        client.post("/signup", data={
            "name": name,
            "email": email,
            "password": password,
            "confirm_password": password,
        })
        return client.post("/login", data={"email": email, "password": password})
    return _login


VALID_BOOKING = {
    "labId": "lab1",
    "name": "Jane Doe",
    "phone": "9876543210",
    "email": "jane@example.com",
    "date": "2025-06-01",
    "time": "10:00",
    "notes": "Fasting sugar test",
}


@pytest.fixture
def booking_form():
    return dict(VALID_BOOKING)
