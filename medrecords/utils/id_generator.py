# /medrecords/utils/id_generator.py
"""Random fixed-width identifiers for patients, pharmacies and pharmacists.

Identifiers double as sign-in names, so they are drawn from ``secrets``
rather than ``random``. Allocation retries against the store until a free
value is found, up to ``IDENTIFIER_MAX_ATTEMPTS``.
"""
import secrets
from flask import current_app
from medrecords.extensions import db
from medrecords.utils.errors import IdentifierExhaustedError

IDENTIFIER_MIN = 10 ** 11
IDENTIFIER_MAX = 10 ** 12 - 1
DEFAULT_MAX_ATTEMPTS = 10


def generate_identifier() -> str:
    """Returns a 12-digit numeric string drawn uniformly from [10^11, 10^12 - 1]."""
    return str(IDENTIFIER_MIN + secrets.randbelow(IDENTIFIER_MAX - IDENTIFIER_MIN + 1))


def is_identifier_unique(model, column: str, value: str) -> bool:
    """True when no ``model`` row already uses ``value`` in ``column``."""
    return db.session.query(model).filter(getattr(model, column) == value).first() is None


def allocate_identifier(model, column: str, max_attempts: int = None) -> str:
    """Generates identifiers until one is free in ``model.column``.

    Raises IdentifierExhaustedError once ``max_attempts`` candidates collided.
    """
    if max_attempts is None:
        max_attempts = current_app.config.get('IDENTIFIER_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS)

    for attempt in range(1, max_attempts + 1):
        candidate = generate_identifier()
        if is_identifier_unique(model, column, candidate):
            return candidate
        current_app.logger.warning(
            f"Identifier collision on {model.__tablename__}.{column} (attempt {attempt}/{max_attempts})"
        )

    raise IdentifierExhaustedError(
        f"No free identifier for {model.__tablename__}.{column} after {max_attempts} attempts"
    )
