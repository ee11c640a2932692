"""
Database Initialization Utility

Creates all tables for the registered models. The operation is idempotent:
existing tables are left untouched. Schema changes after the first deploy
go through Flask-Migrate (``flask db migrate`` / ``flask db upgrade``).
"""

from booking_portal import db
import logging

logger = logging.getLogger(__name__)


def create_all_tables():
    """Create all database tables if they don't exist"""
    try:
        # Import all models to ensure SQLAlchemy knows about them
        from booking_portal.models import (  # noqa: F401
            User, Booking, Attachment, Message, MessageAttachment
        )

        db.create_all()
        logger.info("All database tables created/verified successfully")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise


def initialize_database():
    """
    Main initialization function that sets up the entire database.
    This function is idempotent and safe to call multiple times.
    """
    try:
        logger.info("Starting database initialization...")
        create_all_tables()
        logger.info("Database initialization completed successfully!")
        return True
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        db.session.rollback()
        return False
