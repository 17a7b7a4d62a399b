# macim/__init__.py

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

# db is initialized here, but not attached to an app
db = SQLAlchemy()

# The factory accepts the config class to load (see config.py)
def create_app(config_class):
    app = Flask(__name__)

    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)

    from .blueprints.auth.routes import auth_bp
    from .blueprints.profile.routes import profile_bp
    from .blueprints.listings.routes import listings_bp
    from .blueprints.reservations.routes import reservations_bp
    from .blueprints.fields.routes import fields_bp
    from .blueprints.messages.routes import messages_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(listings_bp)
    app.register_blueprint(reservations_bp)
    app.register_blueprint(fields_bp)
    app.register_blueprint(messages_bp)

    from .core.errors import register_error_handlers
    register_error_handlers(app)

    @app.route('/health')
    def health():
        return {'ok': True}

    with app.app_context():
        from . import models  # noqa: F401  (registers the tables)
        db.create_all()
        if app.config.get('SEED_FIELDS'):
            from .models.field import seed_fields
            seed_fields()

    return app
