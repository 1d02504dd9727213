from flask import Blueprint, jsonify, request

from sistema_saude.errors import NotFound
from sistema_saude.store import get_store

medicos_bp = Blueprint('medicos', __name__, url_prefix='/api/medicos')


@medicos_bp.route('', methods=['GET'])
def list_doctors():
    """
    Public doctor listing.
    Query params:
        especialidade: exact specialty match (optional)
    """
    specialty = request.args.get('especialidade', type=str)
    doctors = get_store().list_doctors(specialty=specialty)
    return jsonify([doctor.to_dict() for doctor in doctors]), 200


@medicos_bp.route('/<doctor_id>', methods=['GET'])
def get_doctor(doctor_id):
    doctor = get_store().get_doctor(doctor_id)
    if not doctor:
        raise NotFound('Médico não encontrado')
    return jsonify(doctor.to_dict()), 200
