"""
Error taxonomy for the API.

Handlers and services raise these; create_app() registers a single
error handler that renders them as ``{"error": message}`` with the
matching HTTP status.
"""


class ClinicError(Exception):
    status_code = 500
    message = 'Erro interno do servidor'

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self):
        body = {'error': self.message}
        if self.details:
            body['detalhes'] = self.details
        return body


class ValidationError(ClinicError):
    status_code = 400
    message = 'Dados inválidos'


class AuthError(ClinicError):
    status_code = 401
    message = 'Não autenticado'


class MissingToken(AuthError):
    message = 'Token não fornecido'


class InvalidToken(AuthError):
    message = 'Token inválido'


class UnknownIdentity(AuthError):
    message = 'Usuário não encontrado'


class InvalidCredentials(AuthError):
    message = 'Email ou senha incorretos'


class Forbidden(ClinicError):
    status_code = 403
    message = 'Acesso negado'


class NotFound(ClinicError):
    status_code = 404
    message = 'Recurso não encontrado'


class InternalError(ClinicError):
    status_code = 500
