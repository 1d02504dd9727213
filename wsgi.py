"""
WSGI entry point for the Sistema de Saúde API
Used by Gunicorn, uWSGI, and other WSGI servers
"""
from sistema_saude import create_app

# Create Flask app instance
application = app = create_app()

if __name__ == '__main__':
    # For development only
    application.run(debug=True)
