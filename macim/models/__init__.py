from .user import User
from .listing import PlayerPost, MatchPost
from .reservation import FieldSettings, Reservation, ProfileReservation
from .message import Message
from .field import Field

__all__ = [
    'User',
    'PlayerPost',
    'MatchPost',
    'FieldSettings',
    'Reservation',
    'ProfileReservation',
    'Message',
    'Field',
]
