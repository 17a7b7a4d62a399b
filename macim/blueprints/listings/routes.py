# macim/blueprints/listings/routes.py

from flask import Blueprint, request, jsonify, g
from macim.models import PlayerPost, MatchPost
from macim.core import listings
from macim.core.storage import parse_id
from macim.core.tokens import login_required

listings_bp = Blueprint('listings', __name__)

# --- Player posts ---

@listings_bp.route('/players', methods=['GET'])
@login_required
def list_players():
    return jsonify({'ok': True, 'posts': listings.list_posts(PlayerPost)})

@listings_bp.route('/players', methods=['POST'])
@login_required
def create_player_post():
    data = request.get_json(silent=True) or {}
    post_id = listings.create_post(PlayerPost, g.user_id, data)
    return jsonify({'ok': True, 'id': post_id})

@listings_bp.route('/my/player-posts', methods=['GET'])
@login_required
def my_player_posts():
    return jsonify({'ok': True, 'posts': listings.list_posts(PlayerPost, owner_id=g.user_id)})

@listings_bp.route('/my/player-posts/<post_id>', methods=['PUT'])
@login_required
def update_player_post(post_id):
    data = request.get_json(silent=True) or {}
    listings.update_post(PlayerPost, g.user_id, parse_id(post_id), data)
    return jsonify({'ok': True})

@listings_bp.route('/my/player-posts/<post_id>', methods=['DELETE'])
@login_required
def delete_player_post(post_id):
    listings.delete_post(PlayerPost, g.user_id, parse_id(post_id))
    return jsonify({'ok': True})

# --- Match posts ---

@listings_bp.route('/matches', methods=['GET'])
@login_required
def list_matches():
    return jsonify({'ok': True, 'matches': listings.list_posts(MatchPost)})

@listings_bp.route('/matches', methods=['POST'])
@login_required
def create_match_post():
    data = request.get_json(silent=True) or {}
    post_id = listings.create_post(MatchPost, g.user_id, data)
    return jsonify({'ok': True, 'id': post_id})

@listings_bp.route('/my/match-posts', methods=['GET'])
@login_required
def my_match_posts():
    return jsonify({'ok': True, 'matches': listings.list_posts(MatchPost, owner_id=g.user_id)})

@listings_bp.route('/my/match-posts/<post_id>', methods=['PUT'])
@login_required
def update_match_post(post_id):
    data = request.get_json(silent=True) or {}
    listings.update_post(MatchPost, g.user_id, parse_id(post_id), data)
    return jsonify({'ok': True})

@listings_bp.route('/my/match-posts/<post_id>', methods=['DELETE'])
@login_required
def delete_match_post(post_id):
    listings.delete_post(MatchPost, g.user_id, parse_id(post_id))
    return jsonify({'ok': True})

@listings_bp.route('/my/post-counts', methods=['GET'])
@login_required
def my_post_counts():
    counts = listings.count_posts(g.user_id)
    return jsonify({'ok': True, 'user_id': g.user_id, **counts})
