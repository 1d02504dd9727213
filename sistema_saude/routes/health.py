"""
API banner and health check
"""
from datetime import datetime, timezone

from flask import Blueprint, jsonify, current_app

from sistema_saude.store import get_store

health_bp = Blueprint('health', __name__, url_prefix='/api')


def _database_status():
    return 'Conectado' if get_store().ping() else 'Desconectado'


@health_bp.route('', methods=['GET'])
def index():
    """API banner - no authentication"""
    return jsonify({
        'mensagem': 'API do Sistema de Saúde - FUNCIONANDO!',
        'versao': current_app.config['API_VERSION'],
        'database': _database_status()
    }), 200


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check including database connection"""
    return jsonify({
        'status': 'OK',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'database': _database_status()
    }), 200
