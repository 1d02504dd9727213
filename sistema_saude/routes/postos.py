from flask import Blueprint, jsonify, request

from sistema_saude.errors import NotFound
from sistema_saude.store import get_store

postos_bp = Blueprint('postos', __name__, url_prefix='/api/postos')


@postos_bp.route('', methods=['GET'])
def list_posts():
    neighborhood = request.args.get('bairro', type=str)
    posts = get_store().list_posts(neighborhood=neighborhood)
    return jsonify([post.to_dict() for post in posts]), 200


@postos_bp.route('/<post_id>', methods=['GET'])
def get_post(post_id):
    post = get_store().get_post(post_id)
    if not post:
        raise NotFound('Posto não encontrado')
    return jsonify(post.to_dict()), 200
