from flask import Blueprint, jsonify

from sistema_saude.utils import autenticar, get_json_body

solicitacoes_bp = Blueprint('solicitacoes', __name__, url_prefix='/api/solicitacoes-medicamento')


@solicitacoes_bp.route('', methods=['POST'])
@autenticar
def request_medication():
    """Acknowledge a medication request. Requests are not persisted."""
    data = get_json_body()
    return jsonify({
        'mensagem': 'Solicitação registrada com sucesso',
        'medicamentoId': data.get('medicamentoId'),
        'postoId': data.get('postoId')
    }), 201
