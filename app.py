# app.py
from flask import Flask, jsonify, render_template, request, g
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
import logging
import sys
import time

from config import Config
from errors import AppError
from routes.verse import verse_bp
from routes.prayer import prayer_bp
from store import get_store
from utils.dispenser import VerseDispenser
from utils.request_log import RequestLogger
from utils.csv_export import CsvExporter

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(config_object=Config, rng=None, clock=None, **overrides):
    """Build the application.

    *rng* and *clock* are handed to the verse dispenser and request logger;
    tests pass a seeded ``random.Random`` and a fixed clock.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    logging.getLogger().setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Use ProxyFix to handle proxy headers properly
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Cross-origin reads of the export are limited to explicitly configured origins
    if app.config.get('EXPORT_CORS_ORIGINS'):
        CORS(app, resources={
            r"/export\.csv": {"origins": app.config['EXPORT_CORS_ORIGINS'], "methods": ["GET"]}
        })

    bible_store = get_store(app.config['BIBLE_FILE'])
    requests_store = get_store(app.config['REQUESTS_FILE'])
    app.extensions['verse_dispenser'] = VerseDispenser(
        bible_store, rng=rng, clock=clock, window=app.config['VERSE_WINDOW']
    )
    app.extensions['request_logger'] = RequestLogger(requests_store, clock=clock)
    app.extensions['csv_exporter'] = CsvExporter(requests_store)

    app.register_blueprint(verse_bp)
    app.register_blueprint(prayer_bp)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"{request.method} {request.path} -> {response.status_code} in {duration:.2f} seconds")
        return response

    @app.errorhandler(AppError)
    def handle_app_error(e):
        logger.error(f"Error handling {request.path}: {str(e)}", exc_info=e)
        return render_template('error.html'), 500

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also verifies both data files parse"""
        try:
            verses = len(bible_store.read_all())
            requests_count = len(requests_store.read_all())
            return jsonify({
                'status': 'healthy',
                'verses': verses,
                'requests': requests_count,
                'timestamp': time.time()
            })
        except AppError as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': time.time()
            }), 500

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Serveur démarré sur http://localhost:{app.config['PORT']}")
    app.run(port=app.config['PORT'])
