import logging

from flask import Blueprint, jsonify

from sistema_saude.errors import NotFound
from sistema_saude.services import access
from sistema_saude.store import get_store
from sistema_saude.utils import autenticar, get_current_user, get_json_body

logger = logging.getLogger(__name__)

consultas_bp = Blueprint('consultas', __name__, url_prefix='/api/consultas')

NOT_FOUND_MESSAGE = 'Consulta não encontrada'


@consultas_bp.route('', methods=['GET'])
@autenticar
def list_appointments():
    """
    Appointments visible to the caller, newest first.
    Patients see their own, doctors those assigned to them, admins all.
    """
    predicate = access.appointment_read_filter(get_current_user())
    appointments = get_store().list_appointments(predicate)
    return jsonify([appointment.to_dict() for appointment in appointments]), 200


@consultas_bp.route('', methods=['POST'])
@autenticar
def create_appointment():
    """
    Book an appointment for the caller.
    Body: {"medicoId", "data", "horario", "tipo", "especialidade"?, "observacoes"?}
    """
    user = get_current_user()
    fields = access.appointment_create_fields(user, get_json_body())
    appointment = get_store().add_appointment(fields)
    logger.info("Appointment %s booked by %s", appointment.id, user.id)
    return jsonify(appointment.to_dict()), 201


@consultas_bp.route('/<appointment_id>', methods=['GET'])
@autenticar
def get_appointment(appointment_id):
    predicate = access.appointment_lookup_filter(get_current_user(), appointment_id)
    appointment = get_store().find_appointment(predicate)
    if not appointment:
        raise NotFound(NOT_FOUND_MESSAGE)
    return jsonify(appointment.to_dict()), 200


@consultas_bp.route('/<appointment_id>', methods=['PATCH'])
@autenticar
def update_appointment(appointment_id):
    """Owner patient only; anyone else gets 404."""
    user = get_current_user()
    changes = access.appointment_update_fields(get_json_body())
    guard = access.appointment_mutation_guard(user, appointment_id)
    appointment = get_store().update_appointment(guard, changes)
    if not appointment:
        raise NotFound(NOT_FOUND_MESSAGE)
    return jsonify(appointment.to_dict()), 200


@consultas_bp.route('/<appointment_id>', methods=['DELETE'])
@autenticar
def delete_appointment(appointment_id):
    """Cancel (delete) an appointment - owner patient only"""
    user = get_current_user()
    guard = access.appointment_mutation_guard(user, appointment_id)
    if not get_store().delete_appointment(guard):
        raise NotFound(NOT_FOUND_MESSAGE)
    logger.info("Appointment %s cancelled by %s", appointment_id, user.id)
    return jsonify({'mensagem': 'Consulta cancelada com sucesso'}), 200
