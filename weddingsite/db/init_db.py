"""
Database initialization script.
"""
import logging
from weddingsite.db.session import init_db

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully!")
