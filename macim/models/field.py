# macim/models/field.py

from flask import current_app
from macim import db
from datetime import datetime

class Field(db.Model):
    """A pitch shown on the map."""
    __tablename__ = 'fields'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    price = db.Column(db.String(50))  # display text, e.g. "₺900 / saat"
    phone = db.Column(db.String(30))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'city': self.city,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'price': self.price,
            'phone': self.phone,
        }

DEMO_FIELDS = [
    dict(name='Arena Halı Saha', city='İstanbul', latitude=41.0082, longitude=28.9784,
         price='₺900 / saat', phone='0555 111 22 33'),
    dict(name='Gol Park', city='İstanbul', latitude=41.0200, longitude=28.9500,
         price='₺750 / saat', phone='0555 444 55 66'),
    dict(name='Şut Arena', city='Ankara', latitude=39.9334, longitude=32.8597,
         price='₺700 / saat', phone='0555 777 88 99'),
]

def seed_fields():
    """Insert the demo pitches if the table is empty. Returns how many were added."""
    if Field.query.count() > 0:
        return 0
    for data in DEMO_FIELDS:
        db.session.add(Field(**data))
    db.session.commit()
    current_app.logger.info("Seeded %d demo fields", len(DEMO_FIELDS))
    return len(DEMO_FIELDS)
