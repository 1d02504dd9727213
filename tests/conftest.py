"""
Global test fixtures for pytest.

Provides:
- A Flask app on in-memory SQLite with fresh tables per test
- Users for each role and Authorization headers for them
- Catalogue records (doctor profile, health post, medication)
"""
import pytest

from sistema_saude import create_app
from sistema_saude.extensions import db
from sistema_saude.models import Doctor, HealthPost
from sistema_saude.services.tokens import issue_token
from sistema_saude.store import get_store

PASSWORD = 'senha123'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return get_store()


@pytest.fixture
def auth_headers(app):
    """Build an Authorization header for a user."""
    def _headers(user):
        return {'Authorization': f'Bearer {issue_token(user)}'}
    return _headers


# ============================================================================
# Users
# ============================================================================

@pytest.fixture
def patient(store):
    return store.add_user(name='Maria Silva', email='maria@email.com', password=PASSWORD,
                          phone='(11) 98765-4321', role='paciente')


@pytest.fixture
def other_patient(store):
    return store.add_user(name='João Santos', email='joao@email.com', password=PASSWORD,
                          role='paciente')


@pytest.fixture
def doctor_user(store):
    return store.add_user(name='Dr. Carlos Silva', email='carlos@email.com', password=PASSWORD,
                          role='medico')


@pytest.fixture
def admin(store):
    return store.add_user(name='Administrador', email='admin@email.com', password=PASSWORD,
                          role='admin')


# ============================================================================
# Catalogue
# ============================================================================

@pytest.fixture
def doctor(store, doctor_user):
    """Practitioner profile for doctor_user; its id differs from the user id."""
    profile = Doctor(
        user_id=doctor_user.id,
        specialty='Cardiologia',
        crm='CRM-SP 123456',
        availability=[{'diaSemana': 1, 'horarios': ['08:00', '09:00']}],
    )
    store.session.add(profile)
    store.commit()
    return profile


@pytest.fixture
def post(store):
    health_post = HealthPost(
        name='Posto de Saúde Central',
        address='Rua das Flores, 123',
        neighborhood='Centro',
        lat=-23.5505,
        lng=-46.6333,
        phone='(11) 3000-0001',
        opening_hours='Segunda a Sexta: 8h às 17h',
    )
    store.session.add(health_post)
    store.commit()
    return health_post


@pytest.fixture
def medication(store, post):
    return store.add_medication(name='Paracetamol 500mg', quantity=10, kind='Analgésico',
                                description='Analgésico - Paracetamol 500mg', post_id=post.id)


@pytest.fixture
def appointment_payload(doctor):
    return {
        'medicoId': doctor.id,
        'data': '2025-03-10',
        'horario': '09:00',
        'tipo': 'presencial',
        'especialidade': 'Cardiologia',
        'observacoes': 'Primeira consulta',
    }
