"""
Development server entry point
Run the Flask application with: python run.py
"""
from sistema_saude import create_app
import os

# Create Flask app instance
app = create_app()

if __name__ == '__main__':
    # Get host and port from environment or use defaults
    host = os.getenv('FLASK_HOST', '0.0.0.0')
    port = int(os.getenv('FLASK_PORT', 3001))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    print(f"""
    ========================================
    Sistema de Saúde - Backend
    ========================================
    API: http://{host}:{port}/api
    Debug: {debug}
    Environment: {os.getenv('FLASK_ENV', 'development')}
    ========================================

    Para popular o banco: python seed_db.py
    Credenciais de teste: maria@email.com / senha123
    ========================================
    """)

    app.run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )
