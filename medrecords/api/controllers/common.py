import secrets
import string
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from medrecords.extensions import db
from medrecords.utils.errors import NotFoundError, UniquenessViolation, InternalError, UnauthorizedError
from medrecords.utils.session_util import current_principal, clear_principal, SIGNIN_PATHS


def generate_random_password(length=8):
    """Generates a random lowercase alphanumeric password for resets."""
    alphabet = string.ascii_lowercase + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def get_or_404(model, primary_key, message):
    record = db.session.get(model, primary_key) if primary_key is not None else None
    if record is None:
        raise NotFoundError(message)
    return record


def ensure_unique(model, column, value, message, exclude=None):
    """Raises UniquenessViolation when another ``model`` row already holds ``value``."""
    query = db.session.query(model).filter(getattr(model, column) == value)
    existing = query.first()
    if existing is not None and existing is not exclude:
        raise UniquenessViolation(message)


def commit_changes(conflict_message='A unique value already exists.'):
    """Commits the session, translating store failures into API errors."""
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise UniquenessViolation(conflict_message)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"Commit failed: {e}")
        raise InternalError(str(e))


def load_principal_record(model, role, cast=str):
    """Returns the record behind the session principal.

    A principal whose record has been deleted is signed out.
    """
    principal = current_principal()
    record = None
    if principal is not None and principal.role == role:
        try:
            record = db.session.get(model, cast(principal.id))
        except ValueError:
            record = None
    if record is None:
        clear_principal()
        raise UnauthorizedError('Your account is no longer available. Please sign in again.',
                                signin=SIGNIN_PATHS[role])
    return record
