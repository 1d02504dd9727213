"""
Role-scoped access rules for appointments, medications and users.

Predicates are plain ``{column: value}`` dicts handed to the store, which
applies them with ``filter_by``. An empty dict means unrestricted.
"""
from datetime import datetime

from sistema_saude.errors import Forbidden, ValidationError
from sistema_saude.models.user import ROLE_PATIENT, ROLE_DOCTOR, ROLE_ADMIN
from sistema_saude.models.appointment import STATUS_PENDING
from sistema_saude.validation import check_text_fields

# Wire name -> Appointment attribute
APPOINTMENT_FIELDS = {
    'data': 'date',
    'horario': 'time',
    'tipo': 'kind',
    'especialidade': 'specialty',
    'status': 'status',
    'observacoes': 'notes',
    'medicoId': 'doctor_id',
}

REQUIRED_APPOINTMENT_FIELDS = ('data', 'horario', 'tipo')
TEXT_FIELDS = tuple(name for name in APPOINTMENT_FIELDS if name != 'data')

DATE_ERROR = 'Campo "data" inválido. Use YYYY-MM-DD'


def appointment_read_filter(user):
    """Visibility predicate for listing and reading appointments.

    Doctors are matched on their *user* id against Appointment.doctor_id,
    which holds a Doctor id; the two only coincide if the data was created
    that way.
    """
    if user.role == ROLE_PATIENT:
        return {'patient_id': user.id}
    if user.role == ROLE_DOCTOR:
        return {'doctor_id': user.id}
    return {}


def appointment_lookup_filter(user, appointment_id):
    predicate = appointment_read_filter(user)
    predicate['id'] = appointment_id
    return predicate


def appointment_mutation_guard(user, appointment_id):
    """Only the owning patient may update or cancel an appointment.

    Applied to every role: anyone else simply finds nothing, so a foreign
    appointment is indistinguishable from a missing one.
    """
    return {'id': appointment_id, 'patient_id': user.id}


def parse_appointment_date(value):
    """Accept YYYY-MM-DD or a full ISO-8601 datetime, keeping the date part."""
    if not isinstance(value, str) or not value:
        raise ValidationError(DATE_ERROR)
    try:
        if len(value) > 10:
            if value[10] != 'T':
                raise ValueError(value)
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise ValidationError(DATE_ERROR)


def _map_fields(payload):
    check_text_fields(payload, TEXT_FIELDS)
    fields = {}
    for wire_name, attr in APPOINTMENT_FIELDS.items():
        if wire_name in payload:
            fields[attr] = payload[wire_name]
    if 'date' in fields:
        fields['date'] = parse_appointment_date(fields['date'])
    return fields


def appointment_create_fields(user, payload):
    """Column values for a new appointment booked by ``user``.

    The patient is always the caller and status always starts pending,
    whatever the payload says. medicoId is taken verbatim.
    """
    missing = [name for name in REQUIRED_APPOINTMENT_FIELDS if not payload.get(name)]
    if missing:
        raise ValidationError(f'Campos obrigatórios ausentes: {", ".join(missing)}')

    fields = _map_fields(payload)
    fields['patient_id'] = user.id
    fields['doctor_id'] = payload.get('medicoId')
    fields['status'] = STATUS_PENDING
    return fields


def appointment_update_fields(payload):
    """Column changes allowed on an existing appointment.

    paciente, id and criadoEm are not in the whitelist and are dropped.
    """
    for name in REQUIRED_APPOINTMENT_FIELDS:
        if name in payload and not payload[name]:
            raise ValidationError(f'Campo "{name}" não pode ser vazio')
    return _map_fields(payload)


def can_write_medication(user):
    # Any authenticated user may change stock
    return user is not None


def require_role(user, *roles):
    if user.role not in roles:
        if roles == (ROLE_ADMIN,):
            raise Forbidden('Acesso negado. Requer permissão de administrador.')
        raise Forbidden(f'Acesso negado. Requer perfil: {", ".join(roles)}')
