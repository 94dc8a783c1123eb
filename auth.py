# auth.py
import secrets
from datetime import datetime

from flask import current_app
from flask_login import LoginManager
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash

from errors import AuthzError, BadPassword, EmailTaken, PasswordMismatch, StorageError, UnknownEmail
from models import db, commit, User, AuthSession

login_manager = LoginManager()


@login_manager.user_loader
def load_user(token):
    return load_session(token)


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthzError()


def normalize_email(email):
    return (email or "").lower().strip()


def register(name, email, password, confirm_password):
    """Create a user with a salted password hash.

    Raises PasswordMismatch or EmailTaken; nothing is written in either case.
    """
    if password != confirm_password:
        raise PasswordMismatch()

    email = normalize_email(email)
    if User.query.filter_by(email=email).first():
        raise EmailTaken()

    user = User(
        name=(name or "").strip(),
        email=email,
        password=generate_password_hash(password, method="pbkdf2:sha256", salt_length=16),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost a race against a concurrent signup for the same email
        db.session.rollback()
        raise EmailTaken()
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise StorageError() from exc
    current_app.logger.info("Registered user %s", user.id)
    return user


def login(email, password):
    """Check credentials and open a new session; returns the AuthSession."""
    email = normalize_email(email)
    user = User.query.filter_by(email=email).first()
    if not user:
        current_app.logger.info("Login attempt for unregistered email")
        raise UnknownEmail()
    if not check_password_hash(user.password, password or ""):
        current_app.logger.info("Failed login for user %s", user.id)
        raise BadPassword()

    now = datetime.utcnow()
    auth_session = AuthSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        user_email=user.email,
        user_name=user.name,
        created_at=now,
        expires_at=now + current_app.config["SESSION_LIFETIME"],
    )
    db.session.add(auth_session)
    commit()
    current_app.logger.info("User %s logged in", user.id)
    return auth_session


def logout(token):
    """Destroy the session; unknown tokens are ignored."""
    if not token:
        return
    auth_session = db.session.get(AuthSession, token)
    if auth_session is None:
        return
    db.session.delete(auth_session)
    commit()


def load_session(token):
    """Return the live session for a token, or None if unknown or expired."""
    if not token:
        return None
    auth_session = db.session.get(AuthSession, token)
    if auth_session is None or auth_session.is_expired():
        return None
    return auth_session
