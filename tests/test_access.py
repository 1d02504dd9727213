"""
Unit tests for the role-scoped access rules, without HTTP or database.
"""
from datetime import date
from types import SimpleNamespace

import pytest

from sistema_saude.errors import Forbidden, ValidationError
from sistema_saude.services import access


def make_user(role, user_id='u1'):
    return SimpleNamespace(id=user_id, role=role)


class TestAppointmentReadFilter:

    def test_patient_sees_own_appointments(self):
        assert access.appointment_read_filter(make_user('paciente')) == {'patient_id': 'u1'}

    def test_doctor_is_matched_on_user_id(self):
        assert access.appointment_read_filter(make_user('medico', 'doc-user')) == {'doctor_id': 'doc-user'}

    def test_admin_is_unrestricted(self):
        assert access.appointment_read_filter(make_user('admin')) == {}

    def test_lookup_adds_id(self):
        predicate = access.appointment_lookup_filter(make_user('paciente'), 'a1')
        assert predicate == {'patient_id': 'u1', 'id': 'a1'}

    def test_lookup_does_not_mutate_read_filter(self):
        user = make_user('admin')
        access.appointment_lookup_filter(user, 'a1')
        assert access.appointment_read_filter(user) == {}


class TestAppointmentCreateFields:

    payload = {
        'medicoId': 'd1',
        'data': '2025-03-10T00:00:00.000Z',
        'horario': '09:00',
        'tipo': 'presencial',
        'observacoes': 'Retorno',
    }

    def test_forces_patient_and_pending_status(self):
        payload = dict(self.payload, paciente='someone-else', status='realizada')
        fields = access.appointment_create_fields(make_user('paciente'), payload)

        assert fields['patient_id'] == 'u1'
        assert fields['status'] == 'pendente'
        assert fields['doctor_id'] == 'd1'
        assert fields['date'] == date(2025, 3, 10)
        assert fields['notes'] == 'Retorno'

    @pytest.mark.parametrize('missing', ['data', 'horario', 'tipo'])
    def test_required_fields(self, missing):
        payload = dict(self.payload)
        del payload[missing]
        with pytest.raises(ValidationError):
            access.appointment_create_fields(make_user('paciente'), payload)

    def test_rejects_unparsable_date(self):
        with pytest.raises(ValidationError):
            access.appointment_create_fields(make_user('paciente'), dict(self.payload, data='10/03/2025'))

    @pytest.mark.parametrize('value', ['2025-03-10xyz', '2025-03-10 09:00', '2025-03-10Tnope', '2025-02-30'])
    def test_rejects_date_with_trailing_garbage(self, value):
        with pytest.raises(ValidationError):
            access.appointment_create_fields(make_user('paciente'), dict(self.payload, data=value))

    def test_accepts_plain_date(self):
        fields = access.appointment_create_fields(make_user('paciente'), dict(self.payload, data='2025-03-11'))
        assert fields['date'] == date(2025, 3, 11)

    @pytest.mark.parametrize('field, value', [
        ('horario', {'h': 9}),
        ('tipo', 1),
        ('medicoId', ['x']),
        ('observacoes', True),
        ('especialidade', 3.5),
    ])
    def test_rejects_non_text_values(self, field, value):
        with pytest.raises(ValidationError):
            access.appointment_create_fields(make_user('paciente'), dict(self.payload, **{field: value}))

    def test_optional_fields_may_be_null(self):
        payload = dict(self.payload, medicoId=None, observacoes=None)
        fields = access.appointment_create_fields(make_user('paciente'), payload)
        assert fields['doctor_id'] is None
        assert fields['notes'] is None


class TestAppointmentMutation:

    @pytest.mark.parametrize('role', ['paciente', 'medico', 'admin'])
    def test_guard_always_requires_ownership(self, role):
        guard = access.appointment_mutation_guard(make_user(role), 'a1')
        assert guard == {'id': 'a1', 'patient_id': 'u1'}

    def test_update_drops_patient_and_unknown_fields(self):
        changes = access.appointment_update_fields({
            'paciente': 'other',
            'id': 'x',
            'criadoEm': '2020-01-01',
            'status': 'confirmada',
            'horario': '10:00',
        })
        assert changes == {'status': 'confirmada', 'time': '10:00'}

    def test_update_rejects_emptied_required_field(self):
        with pytest.raises(ValidationError):
            access.appointment_update_fields({'horario': ''})

    def test_update_rejects_non_text_values(self):
        with pytest.raises(ValidationError):
            access.appointment_update_fields({'status': {'$set': 'x'}})


class TestRoles:

    @pytest.mark.parametrize('role', ['paciente', 'medico', 'admin'])
    def test_any_user_can_write_medication(self, role):
        assert access.can_write_medication(make_user(role)) is True

    def test_require_role(self):
        access.require_role(make_user('admin'), 'admin')
        with pytest.raises(Forbidden):
            access.require_role(make_user('medico'), 'admin')
