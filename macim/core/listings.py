# macim/core/listings.py
"""
Owner-scoped storage for listings (PlayerPost and MatchPost).

Both kinds share one set of functions; the model class says which fields are
required. Every write that touches an existing post filters on the post id
AND the owner id in the same statement, so editing someone else's post looks
exactly like editing a post that does not exist.
"""

from flask import current_app
from sqlalchemy.orm import joinedload

from macim import db
from macim.models import PlayerPost, MatchPost
from macim.core.errors import NotFoundError, ValidationError
from macim.core.storage import storage_guard, clean_text

def _clean_note(value):
    return str(value) if value is not None else None

def create_post(model, owner_id, fields):
    """Validates and stores a new post. Returns its id."""
    values = {}
    for key in model.REQUIRED_FIELDS:
        value = clean_text(fields.get(key))
        if not value:
            raise ValidationError('missing')
        values[key] = value
    for key in model.OPTIONAL_FIELDS:
        # An empty note is stored as no note.
        values[key] = _clean_note(fields.get(key)) or None

    post = model(user_id=owner_id, **values)
    with storage_guard(f'creating a {model.__tablename__} row'):
        db.session.add(post)
        db.session.commit()
    return post.id

def list_posts(model, owner_id=None):
    """All posts of this kind, newest first, with the owner's name. Optionally only one owner's."""
    with storage_guard(f'listing {model.__tablename__}'):
        query = model.query.options(joinedload(model.owner))
        if owner_id is not None:
            query = query.filter_by(user_id=owner_id)
        posts = query.order_by(model.id.desc()).all()
    return [post.to_dict() for post in posts]

def update_post(model, owner_id, post_id, fields):
    """
    Applies only the fields present in `fields`. A required field sent as an
    empty string is rejected before anything is written.
    """
    values = {}
    for key in model.REQUIRED_FIELDS:
        value = clean_text(fields.get(key))
        if value is None:
            continue
        if not value:
            raise ValidationError(f'{key}_required')
        values[key] = value
    for key in model.OPTIONAL_FIELDS:
        value = _clean_note(fields.get(key))
        if value is not None:
            values[key] = value

    with storage_guard(f'updating a {model.__tablename__} row'):
        query = model.query.filter_by(id=post_id, user_id=owner_id)
        if values:
            changes = query.update(values, synchronize_session=False)
            db.session.commit()
        else:
            # Nothing to change, but the caller still learns whether the post is theirs.
            changes = query.count()
    if changes == 0:
        current_app.logger.info("User %s cannot update %s %s", owner_id, model.__tablename__, post_id)
        raise NotFoundError()

def delete_post(model, owner_id, post_id):
    with storage_guard(f'deleting a {model.__tablename__} row'):
        changes = model.query.filter_by(id=post_id, user_id=owner_id).delete(synchronize_session=False)
        db.session.commit()
    if changes == 0:
        current_app.logger.info("User %s cannot delete %s %s", owner_id, model.__tablename__, post_id)
        raise NotFoundError()

def count_posts(owner_id):
    with storage_guard('counting posts'):
        return {
            'player_posts': PlayerPost.query.filter_by(user_id=owner_id).count(),
            'match_posts': MatchPost.query.filter_by(user_id=owner_id).count(),
        }
