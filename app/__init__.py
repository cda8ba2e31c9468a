import logging

from flask import Flask
from flask_cors import CORS

from .services import GeminiClient, ImageFetcher, ImageVerifier

LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'


def configure_logging(level):
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    root.setLevel(level)


def create_app(config_object='config.Config', gemini_client=None, image_fetcher=None):
    app = Flask(__name__)
    CORS(app)

    app.config.from_object(config_object)
    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    if gemini_client is None:
        if not app.config.get('GEMINI_API_KEY'):
            app.logger.warning("GEMINI_API_KEY is not set; verification requests will fail.")
        gemini_client = GeminiClient.from_config(app.config)
    if image_fetcher is None:
        image_fetcher = ImageFetcher.from_config(app.config)

    app.extensions['image_verifier'] = ImageVerifier(image_fetcher, gemini_client)

    from .routes import api_blueprint
    app.register_blueprint(api_blueprint, url_prefix='')

    return app
