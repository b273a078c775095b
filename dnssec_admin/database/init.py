# dnssec_admin/database/init.py
from dnssec_admin.database.models import db
import logging

logger = logging.getLogger(__name__)

def create_tables(app):
    """Create the mapped PowerDNS tables (development and test databases only)"""
    with app.app_context():
        try:
            db.create_all()
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Error creating database tables: {str(e)}")
            raise

def drop_all_tables(app):
    """Drop all tables (use with caution!)"""
    with app.app_context():
        try:
            db.drop_all()
            logger.info("All database tables dropped")
        except Exception as e:
            logger.error(f"Error dropping database tables: {str(e)}")
            raise
