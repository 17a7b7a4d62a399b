# macim/blueprints/reservations/routes.py

from flask import Blueprint, request, jsonify, g
from macim.core import reservations
from macim.core.storage import parse_id
from macim.core.tokens import login_required

reservations_bp = Blueprint('reservations', __name__)

@reservations_bp.route('/reservations', methods=['POST'])
@login_required
def create_reservation():
    data = request.get_json(silent=True) or {}
    reservation_id = reservations.create_reservation(
        g.user_id,
        field_id=data.get('field_id'),
        field_name=data.get('field_name'),
        date=data.get('date'),
        time=data.get('time'),
        price=data.get('price'),
    )
    return jsonify({'ok': True, 'id': reservation_id})

@reservations_bp.route('/reservations/availability', methods=['GET'])
@login_required
def availability():
    result = reservations.get_availability(request.args.get('field_id'), request.args.get('date'))
    return jsonify({'ok': True, **result})

@reservations_bp.route('/my/reservations', methods=['GET'])
@login_required
def my_reservations():
    return jsonify({'ok': True, 'reservations': reservations.list_reservations(g.user_id)})

# The mobile client still calls the older /reservations/<id> path.
@reservations_bp.route('/my/reservations/<reservation_id>', methods=['DELETE'])
@reservations_bp.route('/reservations/<reservation_id>', methods=['DELETE'])
@login_required
def cancel_reservation(reservation_id):
    reservations.cancel_reservation(g.user_id, parse_id(reservation_id))
    return jsonify({'ok': True})

# --- Personal calendar entries ---

@reservations_bp.route('/profile-reservations', methods=['POST'])
@login_required
def create_profile_reservation():
    data = request.get_json(silent=True) or {}
    entry_id = reservations.create_profile_reservation(g.user_id, data)
    return jsonify({'ok': True, 'id': entry_id})

@reservations_bp.route('/my/profile-reservations', methods=['GET'])
@login_required
def my_profile_reservations():
    return jsonify({'ok': True, 'reservations': reservations.list_profile_reservations(g.user_id)})
