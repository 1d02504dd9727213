"""
Demo data: users, doctors, health posts and per-post medication stock.
"""
import logging

from sistema_saude.models import Doctor, HealthPost, Medication
from sistema_saude.services.inventory import apply_quantity

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = 'senha123'

USERS = [
    {'nome': 'Maria Silva', 'email': 'maria@email.com', 'telefone': '(11) 98765-4321', 'tipo': 'paciente'},
    {'nome': 'João Santos', 'email': 'joao@email.com', 'telefone': '(11) 98765-1234', 'tipo': 'paciente'},
    {'nome': 'Dr. Carlos Silva', 'email': 'carlos@email.com', 'telefone': '(11) 91234-5678', 'tipo': 'medico'},
    {'nome': 'Dra. Ana Costa', 'email': 'ana@email.com', 'telefone': '(11) 91234-8765', 'tipo': 'medico'},
    {'nome': 'Administrador', 'email': 'admin@email.com', 'telefone': '(11) 99999-9999', 'tipo': 'admin'},
]

SLOTS = ['08:00', '09:00', '10:00', '14:00', '15:00']

DOCTORS = [
    {
        'email': 'carlos@email.com',
        'especialidade': 'Cardiologia',
        'crm': 'CRM-SP 123456',
        'disponibilidade': [{'diaSemana': day, 'horarios': list(SLOTS)} for day in (1, 3, 5)],
    },
    {
        'email': 'ana@email.com',
        'especialidade': 'Dermatologia',
        'crm': 'CRM-SP 654321',
        'disponibilidade': [{'diaSemana': day, 'horarios': list(SLOTS)} for day in (2, 4)],
    },
]

WEEKDAY_HOURS = 'Segunda a Sexta: 8h às 17h'

POSTS = [
    {'nome': 'Posto de Saúde Central', 'endereco': 'Rua das Flores, 123', 'bairro': 'Centro',
     'lat': -23.5505, 'lng': -46.6333, 'telefone': '(11) 3000-0001'},
    {'nome': 'Posto de Saúde Norte', 'endereco': 'Av. Principal, 456', 'bairro': 'Zona Norte',
     'lat': -23.5205, 'lng': -46.6133, 'telefone': '(11) 3000-0002'},
    {'nome': 'Posto de Saúde Sul', 'endereco': 'Rua das Palmeiras, 789', 'bairro': 'Zona Sul',
     'lat': -23.5805, 'lng': -46.6533, 'telefone': '(11) 3000-0003'},
    {'nome': 'Posto de Saúde Leste', 'endereco': 'Av. das Árvores, 321', 'bairro': 'Zona Leste',
     'lat': -23.5405, 'lng': -46.6033, 'telefone': '(11) 3000-0004'},
    {'nome': 'Posto de Saúde Oeste', 'endereco': 'Rua dos Pinheiros, 654', 'bairro': 'Zona Oeste',
     'lat': -23.5605, 'lng': -46.6633, 'telefone': '(11) 3000-0005'},
]

MEDICATIONS = [
    ('Paracetamol 500mg', 'Analgésico', 45),
    ('Paracetamol 750mg', 'Analgésico', 30),
    ('Amoxicilina 250mg', 'Antibiótico', 12),
    ('Amoxicilina 500mg', 'Antibiótico', 25),
    ('Losartana 50mg', 'Anti-hipertensivo', 0),
    ('Losartana 100mg', 'Anti-hipertensivo', 18),
    ('Metformina 850mg', 'Antidiabético', 28),
    ('Metformina 500mg', 'Antidiabético', 35),
    ('Omeprazol 20mg', 'Gastroprotetor', 35),
    ('Omeprazol 40mg', 'Gastroprotetor', 22),
    ('Sinvastatina 20mg', 'Hipolipemiante', 5),
    ('Sinvastatina 40mg', 'Hipolipemiante', 15),
    ('AAS 100mg', 'Antiagregante Plaquetário', 60),
    ('Insulina NPH', 'Antidiabético', 0),
    ('Captopril 25mg', 'Anti-hipertensivo', 42),
    ('Dipirona 500mg', 'Analgésico', 50),
    ('Ibuprofeno 600mg', 'Anti-inflamatório', 38),
    ('Atenolol 25mg', 'Anti-hipertensivo', 27),
    ('Enalapril 10mg', 'Anti-hipertensivo', 33),
]


def seed_database(store, reset=True):
    """Load the demo data set, wiping existing records first by default.

    Returns a dict of record counts per entity.
    """
    if reset:
        store.reset()
        logger.info("Existing data removed")

    users = {}
    for data in USERS:
        users[data['email']] = store.add_user(
            name=data['nome'],
            email=data['email'],
            password=DEFAULT_PASSWORD,
            phone=data['telefone'],
            role=data['tipo'],
        )

    session = store.session
    doctors = []
    for data in DOCTORS:
        doctor = Doctor(
            user_id=users[data['email']].id,
            specialty=data['especialidade'],
            crm=data['crm'],
            availability=data['disponibilidade'],
        )
        session.add(doctor)
        doctors.append(doctor)

    posts = []
    for data in POSTS:
        post = HealthPost(
            name=data['nome'],
            address=data['endereco'],
            neighborhood=data['bairro'],
            lat=data['lat'],
            lng=data['lng'],
            phone=data['telefone'],
            opening_hours=WEEKDAY_HOURS,
        )
        session.add(post)
        posts.append(post)
    store.commit()

    medications = 0
    for post in posts:
        for name, kind, quantity in MEDICATIONS:
            medication = Medication(
                name=name,
                kind=kind,
                description=f'{kind} - {name}',
                post_id=post.id,
            )
            apply_quantity(medication, quantity)
            session.add(medication)
            medications += 1
    store.commit()

    counts = {
        'usuarios': len(users),
        'medicos': len(doctors),
        'postos': len(posts),
        'medicamentos': medications,
    }
    logger.info("Seeded %s", counts)
    return counts


def print_summary(counts):
    print("=" * 60)
    print("Seed concluído com sucesso!")
    print("=" * 60)
    for entity, total in counts.items():
        print(f"  - {total} {entity} criados")
    print("\nCredenciais de teste:")
    print(f"  Paciente: maria@email.com / {DEFAULT_PASSWORD}")
    print(f"  Médico:   carlos@email.com / {DEFAULT_PASSWORD}")
    print(f"  Admin:    admin@email.com / {DEFAULT_PASSWORD}")
