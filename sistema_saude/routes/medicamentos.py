import logging

from flask import Blueprint, jsonify, request

from sistema_saude.errors import NotFound, ValidationError, Forbidden
from sistema_saude.services import access
from sistema_saude.services.inventory import parse_quantity
from sistema_saude.store import get_store
from sistema_saude.utils import autenticar, get_current_user, get_json_body
from sistema_saude.validation import check_text_fields

logger = logging.getLogger(__name__)

medicamentos_bp = Blueprint('medicamentos', __name__, url_prefix='/api/medicamentos')


def _ensure_can_write():
    if not access.can_write_medication(get_current_user()):
        raise Forbidden()


@medicamentos_bp.route('', methods=['GET'])
def list_medications():
    """
    Public medication listing, sorted by name.
    Query params:
        nome: case-insensitive substring (optional)
        tipo, status, postoId: exact match (optional)
    """
    medications = get_store().list_medications(
        name=request.args.get('nome', type=str),
        kind=request.args.get('tipo', type=str),
        status=request.args.get('status', type=str),
        post_id=request.args.get('postoId', type=str),
    )
    return jsonify([medication.to_dict() for medication in medications]), 200


@medicamentos_bp.route('/<medication_id>', methods=['GET'])
def get_medication(medication_id):
    medication = get_store().get_medication(medication_id)
    if not medication:
        raise NotFound('Medicamento não encontrado')
    return jsonify(medication.to_dict()), 200


@medicamentos_bp.route('', methods=['POST'])
@autenticar
def create_medication():
    """
    Create a medication; status is derived from quantidade.
    Body: {"nome", "tipo"?, "descricao"?, "postoSaude"?, "quantidade"?}
    """
    _ensure_can_write()
    data = get_json_body()
    check_text_fields(data, ('nome', 'tipo', 'descricao', 'postoSaude', 'postoId'))
    if not data.get('nome'):
        raise ValidationError('Campo "nome" é obrigatório')

    store = get_store()
    post_id = data.get('postoSaude') or data.get('postoId')
    if post_id and not store.get_post(post_id):
        raise ValidationError('Posto de saúde inválido')

    medication = store.add_medication(
        name=data['nome'],
        quantity=parse_quantity(data.get('quantidade', 0)),
        kind=data.get('tipo'),
        description=data.get('descricao'),
        post_id=post_id,
    )
    return jsonify(medication.to_dict()), 201


@medicamentos_bp.route('/<medication_id>', methods=['PATCH'])
@autenticar
def update_medication(medication_id):
    """Set the stock quantity; status and ultimaAtualizacao follow."""
    _ensure_can_write()
    data = get_json_body()
    if 'quantidade' not in data:
        raise ValidationError('Campo "quantidade" é obrigatório')
    quantity = parse_quantity(data['quantidade'])

    medication = get_store().update_medication_quantity(medication_id, quantity)
    if not medication:
        raise NotFound('Medicamento não encontrado')

    logger.info("Medication %s set to %d by %s", medication.id, quantity, get_current_user().id)
    return jsonify(medication.to_dict()), 200
