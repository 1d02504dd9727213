#!/usr/bin/env python3
"""
Reset the database and load demo data.
Run with: python seed_db.py
"""
from sistema_saude import create_app
from sistema_saude.extensions import db
from sistema_saude.seeds import seed_database, print_summary
from sistema_saude.store import get_store


def main():
    app = create_app()

    with app.app_context():
        db.create_all()
        print_summary(seed_database(get_store()))


if __name__ == '__main__':
    main()
