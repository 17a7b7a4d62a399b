# macim/models/user.py

from macim import db
from werkzeug.security import generate_password_hash, check_password_hash
from datetime import datetime

class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(254), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    # Profile
    name = db.Column(db.String(100))
    position = db.Column(db.String(50))
    city = db.Column(db.String(100))
    age = db.Column(db.Integer)
    avatar = db.Column(db.Text)  # image reference, usually a base64 data URL

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'position': self.position,
            'city': self.city,
            'age': self.age,
            'avatar': self.avatar,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
