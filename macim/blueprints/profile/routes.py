# macim/blueprints/profile/routes.py

from flask import Blueprint, request, jsonify, g
from macim.core import accounts
from macim.core.tokens import login_required

profile_bp = Blueprint('profile', __name__)

@profile_bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify({'ok': True, 'user': accounts.get_profile(g.user_id)})

@profile_bp.route('/me', methods=['PUT'])
@login_required
def update_me():
    data = request.get_json(silent=True) or {}
    changes = accounts.update_profile(g.user_id, data)
    return jsonify({'ok': True, 'changes': changes})
