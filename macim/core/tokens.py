# macim/core/tokens.py

from datetime import datetime, timedelta, timezone
from functools import wraps

from flask import current_app, request, g
from jose import jwt, JWTError

from macim.core.errors import AuthError

def issue_token(user, expires_delta=None):
    """Signs a bearer token identifying `user`."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=current_app.config['JWT_EXPIRES_DAYS'])
    )
    claims = {'sub': str(user.id), 'email': user.email, 'exp': expire}
    return jwt.encode(claims, current_app.config['JWT_SECRET'],
                      algorithm=current_app.config['JWT_ALGORITHM'])

def decode_token(token):
    """Returns the user id carried by `token`, or raises AuthError('invalid_token')."""
    try:
        payload = jwt.decode(token, current_app.config['JWT_SECRET'],
                             algorithms=[current_app.config['JWT_ALGORITHM']])
        return int(payload['sub'])
    except (JWTError, KeyError, ValueError, TypeError):
        raise AuthError('invalid_token')

def login_required(view):
    """Resolves the caller from the Authorization header into g.user_id."""
    @wraps(view)
    def wrapped(*args, **kwargs):
        header = request.headers.get('Authorization', '')
        if not header.startswith('Bearer '):
            raise AuthError('unauthorized')
        token = header[len('Bearer '):].strip()
        if not token:
            raise AuthError('unauthorized')
        g.user_id = decode_token(token)
        return view(*args, **kwargs)
    return wrapped
