from datetime import timedelta

import jwt
import pytest
from flask_jwt_extended import create_access_token, create_refresh_token, decode_token

from sistema_saude.errors import MissingToken, InvalidToken, UnknownIdentity
from sistema_saude.services.tokens import issue_token, verify_token, token_from_header


class TestIssueToken:

    def test_carries_id_and_role(self, patient):
        claims = decode_token(issue_token(patient))
        assert claims['sub'] == patient.id
        assert claims['tipo'] == 'paciente'

    def test_expires_after_seven_days(self, patient):
        claims = decode_token(issue_token(patient))
        assert claims['exp'] - claims['iat'] == int(timedelta(days=7).total_seconds())


class TestVerifyToken:

    def test_returns_user(self, store, patient):
        assert verify_token(issue_token(patient), store).id == patient.id

    @pytest.mark.parametrize('token', [None, ''])
    def test_missing_token(self, store, token):
        with pytest.raises(MissingToken):
            verify_token(token, store)

    def test_garbage_token(self, store):
        with pytest.raises(InvalidToken):
            verify_token('not-a-jwt', store)

    def test_token_signed_with_another_key(self, store, patient):
        token = jwt.encode(
            {'sub': patient.id, 'type': 'access', 'tipo': 'admin'},
            'some-other-secret-key-that-is-long-enough',
            algorithm='HS256',
        )
        with pytest.raises(InvalidToken):
            verify_token(token, store)

    def test_expired_token(self, store, patient):
        token = create_access_token(identity=patient.id, expires_delta=timedelta(seconds=-1))
        with pytest.raises(InvalidToken):
            verify_token(token, store)

    def test_refresh_token_is_not_accepted(self, store, patient):
        with pytest.raises(InvalidToken):
            verify_token(create_refresh_token(identity=patient.id), store)

    def test_deleted_user(self, store, patient):
        token = issue_token(patient)
        store.session.delete(patient)
        store.commit()
        with pytest.raises(UnknownIdentity):
            verify_token(token, store)


class TestTokenFromHeader:

    def test_bearer_prefix_is_stripped(self):
        assert token_from_header('Bearer abc.def') == 'abc.def'

    @pytest.mark.parametrize('value', [None, '', 'Bearer ', 'Bearer    '])
    def test_empty_values(self, value):
        assert token_from_header(value) is None
