from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from .extensions import db, migrate, bcrypt, jwt
from .errors import ClinicError
import logging
import os

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(config_name=None, store=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    from sistema_saude.config import config, get_config, ProductionConfig
    if config_name:
        config_class = config.get(config_name, config['default'])
    else:
        config_class = get_config()
    if config_class is ProductionConfig:
        config_class.validate()
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    jwt.init_app(app)

    # Data store handle, one per app
    from sistema_saude.store import ClinicStore, EXTENSION_KEY
    app.extensions[EXTENSION_KEY] = store or ClinicStore(db)

    # Initialize CORS
    from sistema_saude.utils.cors import init_cors
    init_cors(app)

    from sistema_saude.middleware import setup_middleware
    setup_middleware(app)

    register_error_handlers(app)

    # Setup logging
    if not app.debug and not app.testing:
        from logging.handlers import RotatingFileHandler

        log_dir = os.path.dirname(app.config['LOG_FILE'])
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            app.config['LOG_FILE'],
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.info('Application startup')

    with app.app_context():
        from . import models  # noqa: F401 - registers tables with SQLAlchemy

        # Register blueprints
        from .routes import (
            health_bp, auth_bp, usuarios_bp, medicos_bp, postos_bp,
            medicamentos_bp, consultas_bp, solicitacoes_bp, stats_bp,
        )
        for blueprint in (health_bp, auth_bp, usuarios_bp, medicos_bp, postos_bp,
                          medicamentos_bp, consultas_bp, solicitacoes_bp, stats_bp):
            app.register_blueprint(blueprint)

        if app.config.get('AUTO_CREATE_TABLES'):
            db.create_all()

    register_commands(app)

    return app


def register_error_handlers(app):

    @app.errorhandler(ClinicError)
    def handle_clinic_error(error):
        if error.status_code >= 500:
            logger.error(f"Internal error: {error.message} ({error.details})")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Endpoint não encontrado'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Método não permitido'}), 405

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.description}), e.code
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        db.session.rollback()
        return jsonify({
            'error': 'Erro interno do servidor',
            'detalhes': str(e)
        }), 500


def register_commands(app):

    @app.cli.command('seed')
    def seed_command():
        """Reset the database and load demo data."""
        from sistema_saude.seeds import seed_database, print_summary
        from sistema_saude.store import get_store
        db.create_all()
        print_summary(seed_database(get_store()))
