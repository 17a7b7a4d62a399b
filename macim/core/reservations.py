# macim/core/reservations.py
"""
Pitch booking.

Slots are whole hours between a field's opening hour and its last bookable
hour (23:00 at the latest; a day never wraps into the next). A booking is a
plain insert; the unique (field_id, date, time) constraint on the
reservations table is what guarantees that a slot is sold at most once.
"""

from datetime import datetime

from flask import current_app
from sqlalchemy.exc import IntegrityError

from macim import db
from macim.models import FieldSettings, Reservation, ProfileReservation
from macim.models.reservation import DEFAULT_PRICE, DEFAULT_OPEN_HOUR, DEFAULT_CLOSE_HOUR
from macim.core.errors import ConflictError, NotFoundError, ValidationError
from macim.core.storage import storage_guard, clean_text

LAST_SLOT_HOUR = 23

def build_slots(open_hour, close_hour):
    """['12:00', '13:00', ...] up to min(23, close_hour - 1) inclusive."""
    end = min(LAST_SLOT_HOUR, close_hour - 1)
    return [f"{hour:02d}:00" for hour in range(open_hour, end + 1)]

def parse_date(value):
    try:
        return datetime.strptime(str(value).strip(), '%Y-%m-%d').strftime('%Y-%m-%d')
    except ValueError:
        raise ValidationError('invalid_date')

def parse_time(value):
    """Accepts HH:MM or HH:MM:SS and returns HH:MM."""
    text = str(value).strip()
    for fmt in ('%H:%M', '%H:%M:%S'):
        try:
            return datetime.strptime(text, fmt).strftime('%H:%M')
        except ValueError:
            continue
    raise ValidationError('invalid_time')

def _positive_int(value, code):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(code)
    if number <= 0:
        raise ValidationError(code)
    return number

def get_field_settings(field_id):
    """Effective price and hours for a field, falling back to the defaults."""
    with storage_guard('reading field settings'):
        settings = db.session.get(FieldSettings, str(field_id))
    if settings is None:
        return {
            'field_id': str(field_id),
            'price': DEFAULT_PRICE,
            'open_hour': DEFAULT_OPEN_HOUR,
            'close_hour': DEFAULT_CLOSE_HOUR,
        }
    return {
        'field_id': settings.field_id,
        'price': settings.price,
        'open_hour': settings.open_hour,
        'close_hour': settings.close_hour,
    }

def set_field_settings(field_id, fields):
    """Creates or replaces a field's settings. Omitted values keep their current/default value."""
    current = get_field_settings(field_id)
    price = _positive_int(fields.get('price', current['price']), 'invalid_price')
    try:
        open_hour = int(fields.get('open_hour', current['open_hour']))
        close_hour = int(fields.get('close_hour', current['close_hour']))
    except (TypeError, ValueError):
        raise ValidationError('invalid_hours')
    if not (0 <= open_hour <= 23 and 1 <= close_hour <= 24 and open_hour < close_hour):
        raise ValidationError('invalid_hours')

    with storage_guard('saving field settings'):
        db.session.merge(FieldSettings(field_id=str(field_id), price=price,
                                       open_hour=open_hour, close_hour=close_hour))
        db.session.commit()
    return get_field_settings(field_id)

def get_availability(field_id, date):
    if not field_id or not date:
        raise ValidationError('missing_fields')
    field_id = str(field_id)
    date = parse_date(date)

    settings = get_field_settings(field_id)
    with storage_guard('reading availability'):
        rows = db.session.query(Reservation.time).filter_by(
            field_id=field_id, date=date
        ).order_by(Reservation.time).all()

    return {
        'field_id': field_id,
        'date': date,
        'open_hour': settings['open_hour'],
        'close_hour': settings['close_hour'],
        'price': settings['price'],
        'slots': build_slots(settings['open_hour'], settings['close_hour']),
        'taken': [str(time)[:5] for (time,) in rows],
    }

def create_reservation(owner_id, field_id, field_name, date, time, price):
    """Books a slot. Raises ConflictError('slot_taken') if someone already holds it."""
    field_id = clean_text(field_id)
    field_name = clean_text(field_name)
    if not field_id or not field_name or not date or not time or not price:
        raise ValidationError('missing_fields')

    date = parse_date(date)
    time = parse_time(time)
    reservation = Reservation(
        user_id=owner_id,
        field_id=field_id,
        field_name=field_name,
        date=date,
        time=time,
        price=_positive_int(price, 'invalid_price'),
    )
    with storage_guard('creating a reservation'):
        db.session.add(reservation)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            current_app.logger.info("Slot %s %s %s already taken", field_id, date, time)
            raise ConflictError('slot_taken')
    return reservation.id

def list_reservations(owner_id):
    with storage_guard('listing reservations'):
        rows = Reservation.query.filter_by(user_id=owner_id).order_by(
            Reservation.date.desc(), Reservation.time.desc()
        ).all()
    return [row.to_dict() for row in rows]

def cancel_reservation(owner_id, reservation_id):
    with storage_guard('cancelling a reservation'):
        changes = Reservation.query.filter_by(
            id=reservation_id, user_id=owner_id
        ).delete(synchronize_session=False)
        db.session.commit()
    if changes == 0:
        raise NotFoundError()

# --- Personal calendar entries ---

def create_profile_reservation(owner_id, fields):
    title = clean_text(fields.get('title'))
    date = clean_text(fields.get('date'))
    time = clean_text(fields.get('time'))
    if not title or not date or not time:
        raise ValidationError('missing_fields')
    note = fields.get('note')

    entry = ProfileReservation(user_id=owner_id, title=title, date=date, time=time,
                               note=str(note) if note is not None else None)
    with storage_guard('creating a profile reservation'):
        db.session.add(entry)
        db.session.commit()
    return entry.id

def list_profile_reservations(owner_id):
    with storage_guard('listing profile reservations'):
        rows = ProfileReservation.query.filter_by(user_id=owner_id).order_by(
            ProfileReservation.date.desc(), ProfileReservation.time.desc()
        ).all()
    return [row.to_dict() for row in rows]
