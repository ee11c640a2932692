from dotenv import load_dotenv
load_dotenv()  # Load .env file

from booking_portal import create_app, db
from config import config
import os
import logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = create_app(config.get(os.environ.get('FLASK_ENV', 'development'), config['default']))

@app.shell_context_processor
def make_shell_context():
    return {'db': db, 'app': app}

if __name__ == '__main__':
    # Ensure database is initialized before running
    with app.app_context():
        from booking_portal.utils.db_init import initialize_database
        logger.info("Verifying database initialization...")
        if initialize_database():
            logger.info("Database ready - starting Flask application")
        else:
            logger.warning("Database initialization had warnings - starting Flask application anyway")

    port = int(os.environ.get('PORT', 8080))
    logger.info(f"Flask application starting on http://0.0.0.0:{port}")
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port)
