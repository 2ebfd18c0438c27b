#!/usr/bin/env python3
"""
GBP Ops Dashboard
A Flask application for managing Google Business Profile clients and their
magic-link onboarding questionnaires.
"""

import os
from dotenv import load_dotenv
from flask import Flask
from flask_mail import Mail
from flask_migrate import Migrate

# Import our modules
from models import db
from utils import t, get_language, format_date, format_datetime
from routes import register_blueprints

# Load environment variables from .env file
load_dotenv()

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'migrations')


def create_app(config=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///gbp_dashboard.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['BASE_URL'] = os.environ.get('BASE_URL', 'http://localhost:5000')
    app.config['STAFF_NOTIFICATION_EMAILS'] = os.environ.get('STAFF_NOTIFICATION_EMAILS', '')

    # Mail is optional; notifications are skipped without MAIL_SERVER
    app.config['MAIL_SERVER'] = os.environ.get('MAIL_SERVER')
    app.config['MAIL_PORT'] = int(os.environ.get('MAIL_PORT', '587'))
    app.config['MAIL_USE_TLS'] = os.environ.get('MAIL_USE_TLS', 'true').lower() == 'true'
    app.config['MAIL_USERNAME'] = os.environ.get('MAIL_USERNAME')
    app.config['MAIL_PASSWORD'] = os.environ.get('MAIL_PASSWORD')
    app.config['MAIL_DEFAULT_SENDER'] = os.environ.get('MAIL_DEFAULT_SENDER')

    if config:
        app.config.update(config)

    # With an empty DATABASE_URL magic link operations report a configuration error
    app.config['DATABASE_CONFIGURED'] = bool(app.config.get('SQLALCHEMY_DATABASE_URI'))
    if not app.config['DATABASE_CONFIGURED']:
        print("[App] Warning: DATABASE_URL is empty, database features are unavailable")
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite://'

    # Handle PostgreSQL URL format for SQLAlchemy 2.0+
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = (
            app.config['SQLALCHEMY_DATABASE_URI'].replace('postgres://', 'postgresql://', 1)
        )

    # Initialize extensions
    db.init_app(app)
    Mail(app)
    Migrate(app, db, directory=MIGRATIONS_DIR)

    # Register blueprints
    register_blueprints(app)

    # Context processor for templates
    @app.context_processor
    def inject_template_vars():
        """Make common variables available in all templates"""
        return {
            't': t,
            'get_language': get_language,
            'format_date': format_date,
            'format_datetime': format_datetime,
        }

    # Database migrations are handled by Flask-Migrate
    # Run: flask db upgrade

    print(f"[App] GBP Ops Dashboard ready, public links use {app.config['BASE_URL']}")
    return app


# Create the application
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
