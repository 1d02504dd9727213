from sistema_saude.models import Doctor, HealthPost


class TestDoctors:

    def test_public_listing_embeds_user_contact(self, client, doctor):
        response = client.get('/api/medicos')

        assert response.status_code == 200
        doctors = response.get_json()
        assert len(doctors) == 1
        assert doctors[0]['especialidade'] == 'Cardiologia'
        assert doctors[0]['usuario']['nome'] == 'Dr. Carlos Silva'
        assert 'password_hash' not in doctors[0]['usuario']
        assert doctors[0]['disponibilidade'] == [{'diaSemana': 1, 'horarios': ['08:00', '09:00']}]

    def test_filter_by_specialty(self, client, store, doctor):
        other = store.add_user(name='Dra. Ana Costa', email='ana@email.com', password='x', role='medico')
        store.session.add(Doctor(user_id=other.id, specialty='Dermatologia', crm='CRM-SP 654321'))
        store.commit()

        response = client.get('/api/medicos?especialidade=Dermatologia')

        assert [d['crm'] for d in response.get_json()] == ['CRM-SP 654321']

    def test_get_by_id(self, client, doctor):
        response = client.get(f'/api/medicos/{doctor.id}')
        assert response.status_code == 200
        assert response.get_json()['id'] == doctor.id

    def test_unknown_id(self, client):
        response = client.get('/api/medicos/nope')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Médico não encontrado'}


class TestHealthPosts:

    def test_listing_and_neighborhood_filter(self, client, store, post):
        store.session.add(HealthPost(name='Posto de Saúde Norte', neighborhood='Zona Norte'))
        store.commit()

        assert len(client.get('/api/postos').get_json()) == 2

        filtered = client.get('/api/postos?bairro=Centro').get_json()
        assert [p['nome'] for p in filtered] == ['Posto de Saúde Central']
        assert filtered[0]['coordenadas'] == {'lat': -23.5505, 'lng': -46.6333}
        assert filtered[0]['horarioFuncionamento'] == 'Segunda a Sexta: 8h às 17h'

    def test_get_by_id(self, client, post):
        response = client.get(f'/api/postos/{post.id}')
        assert response.status_code == 200
        assert response.get_json()['bairro'] == 'Centro'

    def test_unknown_id(self, client):
        assert client.get('/api/postos/nope').status_code == 404


class TestHealth:

    def test_banner(self, client):
        body = client.get('/api').get_json()
        assert body['versao'] == '1.0.0'
        assert body['database'] == 'Conectado'

    def test_health(self, client):
        body = client.get('/api/health').get_json()
        assert body['status'] == 'OK'

    def test_unknown_route(self, client):
        response = client.get('/api/nao-existe')
        assert response.status_code == 404
        assert 'error' in response.get_json()
