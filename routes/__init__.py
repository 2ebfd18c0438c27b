from flask import redirect, url_for
from .dashboard import dashboard_bp
from .onboarding import onboarding_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(onboarding_bp)

    @app.route('/')
    def index():
        return redirect(url_for('dashboard.index'))
