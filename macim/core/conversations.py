# macim/core/conversations.py

from flask import current_app
from sqlalchemy import and_, case, func, or_

from macim import db
from macim.models import Message, User
from macim.core.errors import NotFoundError, ValidationError
from macim.core.storage import storage_guard

def _between(user_id, other_user_id):
    return or_(
        and_(Message.sender_id == user_id, Message.receiver_id == other_user_id),
        and_(Message.sender_id == other_user_id, Message.receiver_id == user_id),
    )

def list_inbox(user_id):
    """One entry per counterpart: the newest message exchanged with them."""
    other = case(
        (Message.sender_id == user_id, Message.receiver_id),
        else_=Message.sender_id,
    ).label('other_user_id')
    latest = db.session.query(
        other, func.max(Message.id).label('last_id')
    ).filter(
        or_(Message.sender_id == user_id, Message.receiver_id == user_id)
    ).group_by(other).subquery()

    with storage_guard('reading an inbox'):
        rows = db.session.query(
            Message, latest.c.other_user_id, User.name, User.email
        ).join(
            latest, latest.c.last_id == Message.id
        ).outerjoin(
            User, User.id == latest.c.other_user_id
        ).order_by(Message.id.desc()).all()

    return [
        {
            'id': message.id,
            'text': message.text,
            'created_at': message.created_at.isoformat() if message.created_at else None,
            'other_user_id': other_user_id,
            'other_user_name': name,
            'other_user_email': email,
        }
        for message, other_user_id, name, email in rows
    ]

def get_thread(user_id, other_user_id):
    with storage_guard('reading a conversation'):
        messages = Message.query.filter(
            _between(user_id, other_user_id)
        ).order_by(Message.id.asc()).all()
    return [message.to_dict() for message in messages]

def send_message(sender_id, receiver_id, text):
    if not receiver_id or text is None or not str(text).strip():
        raise ValidationError('missing_fields')

    with storage_guard('sending a message'):
        if db.session.get(User, receiver_id) is None:
            raise NotFoundError('user_not_found')
        message = Message(sender_id=sender_id, receiver_id=receiver_id, text=str(text))
        db.session.add(message)
        db.session.commit()
    return message.id

def delete_conversation(user_id, other_user_id):
    """Removes every message between the two users, in both directions. Returns the count."""
    with storage_guard('deleting a conversation'):
        deleted = Message.query.filter(
            _between(user_id, other_user_id)
        ).delete(synchronize_session=False)
        db.session.commit()
    current_app.logger.info("User %s deleted %d messages with %s", user_id, deleted, other_user_id)
    return deleted
