from flask import Blueprint, jsonify

from sistema_saude.errors import NotFound
from sistema_saude.store import get_store
from sistema_saude.utils import autenticar, require_role, get_current_user

usuarios_bp = Blueprint('usuarios', __name__, url_prefix='/api/usuarios')


@usuarios_bp.route('', methods=['GET'])
@autenticar
@require_role('admin')
def list_users():
    """All users, without password hashes (admin only)"""
    return jsonify([user.to_dict() for user in get_store().list_users()]), 200


@usuarios_bp.route('/me', methods=['GET'])
@autenticar
def get_me():
    return jsonify(get_current_user().to_dict()), 200


@usuarios_bp.route('/<user_id>', methods=['GET'])
@autenticar
@require_role('admin')
def get_user(user_id):
    user = get_store().get_user(user_id)
    if not user:
        raise NotFound('Usuário não encontrado')
    return jsonify(user.to_dict()), 200
