# dnssec_admin/database/service.py
from dnssec_admin.database.models import db, Domain, DomainMetadata
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from dnssec_admin.dnssec.errors import DatabaseError, DomainNotFoundError, ERR_DOMAIN_NOT_FOUND
import logging

logger = logging.getLogger(__name__)

class ZoneRepository:
    """Read access to the PowerDNS domains and domainmetadata tables"""

    def get_zone_name(self, domain_id):
        """
        Resolve a domain ID to its zone name

        Args:
            domain_id (int): Domain ID

        Returns:
            str: Zone name

        Raises:
            DomainNotFoundError: If no domain has this ID
            DatabaseError: If the query fails
        """
        try:
            name = db.session.query(Domain.name).filter(Domain.id == domain_id).scalar()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning(f"Database error resolving domain {domain_id}: {str(e)}")
            raise DatabaseError(str(e))

        if name is None:
            raise DomainNotFoundError(f"{ERR_DOMAIN_NOT_FOUND}: {domain_id}")
        return name

    def count_metadata(self, domain_id):
        """
        Count domainmetadata rows for a domain

        Raises:
            DatabaseError: If the query fails
        """
        try:
            return db.session.query(func.count(DomainMetadata.id))\
                .filter(DomainMetadata.domain_id == domain_id)\
                .scalar() or 0
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.warning(f"Database error counting metadata for domain {domain_id}: {str(e)}")
            raise DatabaseError(str(e))

