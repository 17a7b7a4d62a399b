# macim/core/accounts.py

from flask import current_app
from sqlalchemy.exc import IntegrityError

from macim import db
from macim.models import User
from macim.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from macim.core.storage import storage_guard, clean_text
from macim.core.tokens import issue_token

MIN_PASSWORD_LENGTH = 6
PROFILE_TEXT_FIELDS = ('name', 'position', 'city', 'avatar')

def _normalize_email(email):
    return str(email).strip().lower()

def register(email, password):
    """Creates an account and returns a token for it."""
    if not email or not password:
        raise ValidationError('missing_fields')
    if len(str(password)) < MIN_PASSWORD_LENGTH:
        raise ValidationError('password_too_short')

    user = User(email=_normalize_email(email))
    user.set_password(str(password))
    with storage_guard('registering a user'):
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError('email_exists', status=400)

    current_app.logger.info("Registered user %s", user.id)
    return issue_token(user)

def login(email, password):
    if not email or not password:
        raise ValidationError('missing_fields')

    with storage_guard('looking up a login'):
        user = User.query.filter_by(email=_normalize_email(email)).first()
    if not user or not user.check_password(str(password)):
        raise AuthError('invalid_credentials')
    return issue_token(user)

def get_profile(user_id):
    with storage_guard('reading a profile'):
        user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError()
    return user.to_dict()

def update_profile(user_id, fields):
    """
    Applies the non-blank profile fields. Blank strings and nulls keep the
    stored value, so a client can send its whole form back unchanged.
    Returns the number of rows changed (0 or 1).
    """
    values = {}
    for key in PROFILE_TEXT_FIELDS:
        value = clean_text(fields.get(key))
        if value:
            values[key] = value

    age = fields.get('age')
    if age is not None and age != '':
        try:
            values['age'] = int(age)
        except (TypeError, ValueError):
            raise ValidationError('invalid_age')

    with storage_guard('updating a profile'):
        query = User.query.filter_by(id=user_id)
        if not values:
            return query.count()
        changes = query.update(values, synchronize_session=False)
        db.session.commit()
    return changes
