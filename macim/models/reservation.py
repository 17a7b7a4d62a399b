# macim/models/reservation.py

from macim import db
from datetime import datetime

# Operating hours used when a field has no settings row
DEFAULT_PRICE = 1200
DEFAULT_OPEN_HOUR = 12
DEFAULT_CLOSE_HOUR = 24

class FieldSettings(db.Model):
    """Per-pitch pricing and opening hours, keyed by the pitch's external id."""
    __tablename__ = 'field_settings'

    field_id = db.Column(db.String(64), primary_key=True)
    price = db.Column(db.Integer, nullable=False, default=DEFAULT_PRICE)
    open_hour = db.Column(db.Integer, nullable=False, default=DEFAULT_OPEN_HOUR)
    close_hour = db.Column(db.Integer, nullable=False, default=DEFAULT_CLOSE_HOUR)

class Reservation(db.Model):
    __tablename__ = 'reservations'
    # At most one booking per pitch, day and hour. Enforced by the database,
    # so two concurrent inserts cannot both succeed.
    __table_args__ = (
        db.UniqueConstraint('field_id', 'date', 'time', name='uq_reservation_slot'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    field_id = db.Column(db.String(64), nullable=False)
    field_name = db.Column(db.String(150), nullable=False)
    date = db.Column(db.String(10), nullable=False)  # YYYY-MM-DD
    time = db.Column(db.String(5), nullable=False)   # HH:MM
    price = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'field_id': self.field_id,
            'field_name': self.field_name,
            'date': self.date,
            'time': self.time,
            'price': self.price,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

class ProfileReservation(db.Model):
    """A personal calendar entry; not tied to a pitch slot."""
    __tablename__ = 'profile_reservations'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    title = db.Column(db.String(150), nullable=False)
    date = db.Column(db.String(10), nullable=False)
    time = db.Column(db.String(8), nullable=False)
    note = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'date': self.date,
            'time': self.time,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
