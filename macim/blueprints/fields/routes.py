# macim/blueprints/fields/routes.py

from flask import Blueprint, request, jsonify
from macim.models import Field
from macim.core import reservations
from macim.core.storage import storage_guard
from macim.core.tokens import login_required

fields_bp = Blueprint('fields', __name__, url_prefix='/fields')

@fields_bp.route('', methods=['GET'])
def list_fields():
    """Public: the map screen loads pitches before the user signs in."""
    with storage_guard('listing fields'):
        fields = Field.query.order_by(Field.id).all()
    return jsonify({'ok': True, 'fields': [field.to_dict() for field in fields]})

@fields_bp.route('/<field_id>/settings', methods=['GET'])
@login_required
def get_settings(field_id):
    return jsonify({'ok': True, 'settings': reservations.get_field_settings(field_id)})

@fields_bp.route('/<field_id>/settings', methods=['PUT'])
@login_required
def update_settings(field_id):
    data = request.get_json(silent=True) or {}
    return jsonify({'ok': True, 'settings': reservations.set_field_settings(field_id, data)})
