# macim/blueprints/auth/routes.py

from flask import Blueprint, request, jsonify
from macim.core import accounts

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

@auth_bp.route('/register', methods=['POST'])
def register():
    data = request.get_json(silent=True) or {}
    token = accounts.register(data.get('email'), data.get('password'))
    return jsonify({'ok': True, 'token': token})

@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    token = accounts.login(data.get('email'), data.get('password'))
    return jsonify({'ok': True, 'token': token})
