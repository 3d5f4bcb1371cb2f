from flask import Flask
from marshmallow import ValidationError
from flask_smorest import Api

from .config import load_config
from .routes import register_routes
from .utils.error_handlers import handle_validation_error, handle_type_error
from .utils.logger import Log


def create_promotion_app(config_object=None):
    app = Flask(__name__)

    # Load configuration, including the flask-smorest OpenAPI keys
    selected = load_config(app, config_object)

    api = Api(app)

    # Register custom error handlers
    app.errorhandler(ValidationError)(handle_validation_error)
    app.errorhandler(TypeError)(handle_type_error)

    register_routes(app, api)

    Log.info(f"[__init__.py][create_promotion_app] started with {selected.__name__}")
    return app
