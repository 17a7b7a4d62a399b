# macim/core/storage.py

from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from macim import db
from macim.core.errors import StorageError, ValidationError

@contextmanager
def storage_guard(action):
    """Rolls back and re-raises any database failure as StorageError."""
    try:
        yield
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Storage failure while %s", action)
        raise StorageError()

def clean_text(value):
    """None stays None, anything else becomes a stripped string."""
    if value is None:
        return None
    return str(value).strip()

def parse_id(value, code='invalid_id'):
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(code)
    if parsed <= 0:
        raise ValidationError(code)
    return parsed
