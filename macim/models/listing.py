# macim/models/listing.py

from macim import db
from datetime import datetime

class PlayerPost(db.Model):
    """A 'we need a player' listing."""
    __tablename__ = 'player_posts'

    # Fields the owner fills in; the first group must never be empty.
    REQUIRED_FIELDS = ('position', 'city')
    OPTIONAL_FIELDS = ('note',)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    position = db.Column(db.String(50), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    note = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    owner = db.relationship('User', backref=db.backref('player_posts', lazy=True))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'position': self.position,
            'city': self.city,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'name': self.owner.name if self.owner else None,
        }

class MatchPost(db.Model):
    """A 'we need an opposing team' listing."""
    __tablename__ = 'match_posts'

    REQUIRED_FIELDS = ('city', 'field', 'match_date', 'match_time')
    OPTIONAL_FIELDS = ('note',)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    city = db.Column(db.String(100), nullable=False)
    field = db.Column(db.String(150), nullable=False)
    match_date = db.Column(db.String(10), nullable=False)  # YYYY-MM-DD
    match_time = db.Column(db.String(8), nullable=False)   # HH:MM, any minute
    note = db.Column(db.Text)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    owner = db.relationship('User', backref=db.backref('match_posts', lazy=True))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'city': self.city,
            'field': self.field,
            'match_date': self.match_date,
            'match_time': self.match_time,
            'note': self.note,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'name': self.owner.name if self.owner else None,
        }
