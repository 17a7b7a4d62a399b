# macim/blueprints/messages/routes.py

from flask import Blueprint, request, jsonify, g
from macim.core import conversations
from macim.core.storage import parse_id
from macim.core.tokens import login_required

messages_bp = Blueprint('messages', __name__, url_prefix='/messages')

@messages_bp.route('/inbox', methods=['GET'])
@login_required
def inbox():
    return jsonify({'ok': True, 'inbox': conversations.list_inbox(g.user_id)})

@messages_bp.route('/chat/<other_user_id>', methods=['GET'])
@login_required
def chat(other_user_id):
    other = parse_id(other_user_id, code='invalid_other_user')
    return jsonify({'ok': True, 'messages': conversations.get_thread(g.user_id, other)})

@messages_bp.route('', methods=['POST'])
@login_required
def send():
    data = request.get_json(silent=True) or {}
    receiver_id = data.get('receiver_id')
    if receiver_id is not None:
        receiver_id = parse_id(receiver_id, code='invalid_other_user')
    message_id = conversations.send_message(g.user_id, receiver_id, data.get('text'))
    return jsonify({'ok': True, 'id': message_id})

@messages_bp.route('/conversation/<other_user_id>', methods=['DELETE'])
@login_required
def delete_conversation(other_user_id):
    other = parse_id(other_user_id, code='invalid_other_user')
    deleted = conversations.delete_conversation(g.user_id, other)
    return jsonify({'ok': True, 'deleted': deleted})
