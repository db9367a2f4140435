# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from routes.bible import bible_bp
from routes.bookmarks_routes import bookmarks_bp
from database import init_db
from utils.bible_data import get_library
import os
import logging
import time
import sys
from werkzeug.middleware.proxy_fix import ProxyFix

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)

# Use ProxyFix to handle proxy headers properly
app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

app.json.sort_keys = False  # Preserve order of keys in JSON responses
app.json.ensure_ascii = False  # Book names are Portuguese
app.json.compact = True
app.config['MAX_CONTENT_LENGTH'] = 1 * 1024 * 1024  # 1MB max request size

CORS(app, resources={
    r"/api/*": {
        "origins": "*",
        "methods": ["GET", "POST", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "expose_headers": ["Content-Type", "Authorization"],
        "supports_credentials": True
    }
})

# Ensure URLs with or without trailing slashes are handled the same way
app.url_map.strict_slashes = False

# Create bookmark and daily verse tables
try:
    logger.info("Initializing database...")
    init_db()
    logger.info("Database ready")
except Exception as e:
    logger.error(f"Error initializing database: {str(e)}")
    raise

# Register blueprints
app.register_blueprint(bible_bp, url_prefix='/api/bible')
app.register_blueprint(bookmarks_bp)

@app.before_request
def before_request():
    g.start_time = time.time()

@app.after_request
def after_request(response):
    # Log request duration
    duration = time.time() - g.start_time
    logger.info(f"Request to {request.path} took {duration:.2f} seconds")
    return response

@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint that also verifies the default dataset loads"""
    try:
        library = get_library()
        books = library.get_books(library.default_translation)
        return jsonify({
            'status': 'healthy',
            'translation': library.default_translation,
            'books': len(books),
            'timestamp': time.time()
        })
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return jsonify({
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': time.time()
        }), 500

if __name__ == '__main__':
    print("Starting Flask server...")
    port = int(os.getenv('PORT', 5001))
    app.run(debug=True, port=port)
