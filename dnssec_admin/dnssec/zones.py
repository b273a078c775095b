# dnssec_admin/dnssec/zones.py
import logging
from typing import NamedTuple, Optional, Tuple

from dnssec_admin.dnssec.runner import CommandRunner
from dnssec_admin.dnssec.errors import (
    DnssecError,
    CommandFailedError,
    MetadataInconsistentError,
    ERR_EXEC_PDNSSEC,
    ERR_EXEC_PDNSSEC_SECURE_ZONE,
    ERR_EXEC_PDNSSEC_DISABLE_ZONE,
    ERR_EXEC_PDNSSEC_SHOW_ZONE,
    ERR_EXEC_PDNSSEC_RECTIFY_ZONE,
)
from dnssec_admin.database.service import ZoneRepository
from dnssec_admin.utils.dns_utils import normalize_zone_name

logger = logging.getLogger(__name__)

# Line printed by `pdnsutil show-zone` for zones without active keys
NOT_SECURED_MARKER = "Zone is not actively secured"


class OperationResult(NamedTuple):
    success: bool
    error: Optional[DnssecError] = None
    output: Tuple[str, ...] = ()

    def __bool__(self):
        return self.success

    def to_dict(self):
        return {
            "success": self.success,
            "error": self.error.to_dict() if self.error else None,
            "output": list(self.output)
        }


def _failure(error, output=()):
    logger.error(f"DNSSEC operation failed: {error.message}")
    return OperationResult(False, error, tuple(output))


class DnssecService:
    """
    DNSSEC zone operations performed through the PowerDNS utility.

    Failures are returned as an OperationResult carrying a single error, the
    caller decides how to surface it. No operation is retried or rolled back.
    """

    def __init__(self, runner: CommandRunner, repository=None):
        self.runner = runner
        self.repository = repository if repository is not None else ZoneRepository()

    def _run_zone_command(self, subcommand, zone_name, failure_message):
        try:
            zone = normalize_zone_name(zone_name)
        except DnssecError as e:
            return _failure(e)

        unavailable = self.runner.availability_error()
        if unavailable is not None:
            return _failure(unavailable)

        result = self.runner.run(subcommand, zone)
        if result.exit_code != 0:
            return _failure(
                CommandFailedError(failure_message, subcommand=subcommand, exit_code=result.exit_code),
                result.output
            )

        logger.info(f"{subcommand} succeeded for zone {zone}")
        return OperationResult(True, None, result.output)

    def secure_zone(self, zone_name) -> OperationResult:
        """
        Execute secure-zone for a zone name

        Args:
            zone_name (str): Zone name

        Returns:
            OperationResult: Success if the utility exited with 0
        """
        return self._run_zone_command('secure-zone', zone_name, ERR_EXEC_PDNSSEC_SECURE_ZONE)

    def disable_zone(self, zone_name) -> OperationResult:
        """
        Execute disable-dnssec for a zone name

        Args:
            zone_name (str): Zone name

        Returns:
            OperationResult: Success if the utility exited with 0
        """
        return self._run_zone_command('disable-dnssec', zone_name, ERR_EXEC_PDNSSEC_DISABLE_ZONE)

    def zone_secured(self, zone_name) -> OperationResult:
        """
        Check if a zone is secured.

        Runs the read-only show-zone subcommand and looks for the marker line
        printed for zones without active keys. An unsecured zone gives a
        failed result without an error.

        Args:
            zone_name (str): Zone name

        Returns:
            OperationResult: success is True only for a secured zone
        """
        result = self._run_zone_command('show-zone', zone_name, ERR_EXEC_PDNSSEC_SHOW_ZONE)
        if not result.success:
            return result

        secured = not any(NOT_SECURED_MARKER in line for line in result.output)
        return OperationResult(secured, None, result.output)

    def rectify_zone(self, domain_id) -> OperationResult:
        """
        Execute rectify-zone for a domain ID

        If the utility is configured, rectify-zone runs for every zone, as
        PowerDNS needs the auth column for all zones once DNSSEC is in use.
        Metadata rows for a domain without a configured utility are an error.

        Args:
            domain_id (int): Domain ID

        Returns:
            OperationResult: Failure with no error when nothing had to be done
        """
        try:
            count = self.repository.count_metadata(domain_id)
        except DnssecError as e:
            return _failure(e)

        if self.runner.configured:
            try:
                zone = normalize_zone_name(self.repository.get_zone_name(domain_id))
            except DnssecError as e:
                return _failure(e)

            unavailable = self.runner.availability_error()
            if unavailable is not None:
                return _failure(unavailable)

            result = self.runner.run('rectify-zone', zone)
            if result.exit_code != 0:
                return _failure(
                    CommandFailedError(ERR_EXEC_PDNSSEC_RECTIFY_ZONE, subcommand='rectify-zone',
                                       exit_code=result.exit_code),
                    result.output
                )

            logger.info(f"rectify-zone succeeded for zone {zone} (domain {domain_id})")
            return OperationResult(True, None, result.output)

        if count >= 1:
            return _failure(MetadataInconsistentError(ERR_EXEC_PDNSSEC))

        logger.debug(f"No rectify needed for domain {domain_id}, DNSSEC utility not configured")
        return OperationResult(False)
