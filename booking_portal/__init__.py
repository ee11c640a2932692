from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_session import Session
from flasgger import Swagger

db = SQLAlchemy()
migrate = Migrate()
swagger = Swagger()
limiter = Limiter(key_func=get_remote_address)
server_session = Session()

def create_app(config_class=None):
    """Application factory pattern"""
    if config_class is None:
        from config import Config
        config_class = Config

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO').upper())
    # '/bookings' and '/bookings/' must both reach the collection routes
    app.url_map.strict_slashes = False

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    # Session records live in the app database unless another store is configured
    if app.config.get('SESSION_TYPE') == 'sqlalchemy':
        app.config.setdefault('SESSION_SQLALCHEMY', db)
    server_session.init_app(app)

    # Swagger configuration
    app.config['SWAGGER'] = {
        'title': 'Booking Portal API Documentation',
        'uiversion': 3,
        'openapi': '3.0.0',
        'info': {
            'title': 'Booking Portal API',
            'description': 'API documentation for the booking portal',
            'version': '1.0.0',
        },
        'components': {
            'securitySchemes': {
                'cookieAuth': {
                    'type': 'apiKey',
                    'in': 'cookie',
                    'name': app.config.get('SESSION_COOKIE_NAME', 'sessionId'),
                    'description': 'Session cookie set by /login or /register'
                }
            }
        }
    }
    swagger.init_app(app)

    # Credentialed CORS needs an explicit origin, never '*'
    CORS(app, resources={r"/*": {
        "origins": app.config.get('CORS_ORIGIN'),
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "expose_headers": ["Content-Type"],
        "supports_credentials": True
    }})

    from booking_portal.utils.middleware import register_error_handlers, register_request_hooks
    register_request_hooks(app)
    register_error_handlers(app)

    # Register blueprints - resource-based structure
    from booking_portal.routes import health, registration, login, users, bookings

    app.register_blueprint(health.bp, url_prefix='/health-check')
    app.register_blueprint(registration.bp, url_prefix='/register')
    app.register_blueprint(login.bp, url_prefix='/login')
    app.register_blueprint(users.bp, url_prefix='/users')
    app.register_blueprint(bookings.bp, url_prefix='/bookings')

    return app
