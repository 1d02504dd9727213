from flask import Blueprint, jsonify

from sistema_saude.models.appointment import STATUS_DONE
from sistema_saude.models.medication import STATUS_AVAILABLE
from sistema_saude.services import access
from sistema_saude.store import get_store
from sistema_saude.utils import autenticar, get_current_user

stats_bp = Blueprint('stats', __name__, url_prefix='/api/stats')


@stats_bp.route('/dashboard', methods=['GET'])
@autenticar
def dashboard():
    """
    Dashboard counters.
    Appointment counts follow the caller's visibility; medication and
    doctor counts are global.
    """
    store = get_store()
    predicate = access.appointment_read_filter(get_current_user())
    return jsonify({
        'consultasAgendadas': store.count_appointments(predicate),
        'consultasRealizadas': store.count_appointments(predicate, status=STATUS_DONE),
        'medicamentosDisponiveis': store.count_medications(status=STATUS_AVAILABLE),
        'medicosDisponiveis': store.count_doctors()
    }), 200
