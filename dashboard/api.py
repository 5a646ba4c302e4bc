from dashboard.routes import api_bp


def register_api(app):
    """Register blueprint routes under the API prefix."""
    app.register_blueprint(api_bp)
