from .health import health_bp
from .auth import auth_bp
from .usuarios import usuarios_bp
from .medicos import medicos_bp
from .postos import postos_bp
from .medicamentos import medicamentos_bp
from .consultas import consultas_bp
from .solicitacoes import solicitacoes_bp
from .stats import stats_bp

__all__ = [
    'health_bp', 'auth_bp', 'usuarios_bp', 'medicos_bp', 'postos_bp',
    'medicamentos_bp', 'consultas_bp', 'solicitacoes_bp', 'stats_bp',
]
