import logging

from flask import Blueprint, jsonify

from sistema_saude.errors import ValidationError, InvalidCredentials
from sistema_saude.models.user import ROLES, ROLE_PATIENT
from sistema_saude.services.tokens import issue_token
from sistema_saude.store import get_store
from sistema_saude.utils import get_json_body
from sistema_saude.validation import check_text_fields

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/registro', methods=['POST'])
def register():
    """
    Register a new user and log them in.
    Body: {"nome", "email", "senha", "telefone"?, "tipo"?}
    """
    data = get_json_body()
    check_text_fields(data, ('nome', 'email', 'senha', 'telefone', 'tipo'))
    name = data.get('nome')
    email = data.get('email')
    password = data.get('senha')
    role = data.get('tipo') or ROLE_PATIENT

    if not name or not email or not password:
        raise ValidationError('Campos "nome", "email" e "senha" são obrigatórios')
    if role not in ROLES:
        raise ValidationError(f'Tipo inválido. Use: {", ".join(ROLES)}')

    store = get_store()
    if store.find_user_by_email(email):
        raise ValidationError('Email já cadastrado')

    user = store.add_user(
        name=name,
        email=email,
        password=password,
        phone=data.get('telefone'),
        role=role,
    )
    logger.info("Registered user %s (%s)", user.id, user.role)

    return jsonify({
        'mensagem': 'Usuário criado com sucesso',
        'token': issue_token(user),
        'user': user.to_dict()
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login endpoint - returns a bearer token and the user"""
    data = get_json_body()
    check_text_fields(data, ('email', 'senha'))
    email = data.get('email')
    password = data.get('senha')

    if not email or not password:
        raise ValidationError('Email e senha são obrigatórios')

    user = get_store().find_user_by_email(email)
    if not user or not user.check_password(password):
        raise InvalidCredentials()

    return jsonify({
        'user': user.to_dict(),
        'token': issue_token(user)
    }), 200
