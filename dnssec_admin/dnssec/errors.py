# dnssec_admin/dnssec/errors.py


class DnssecError(Exception):
    """Base class for failures of a DNSSEC zone operation"""
    code = "dnssec_error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {
            'code': self.code,
            'message': self.message
        }


class ToolUnavailableError(DnssecError):
    """Process execution disabled, or the utility is missing or not executable"""
    code = "tool_unavailable"


class CommandFailedError(DnssecError):
    """The utility ran but exited with a non-zero status"""
    code = "command_failed"

    def __init__(self, message, subcommand=None, exit_code=None):
        super().__init__(message)
        self.subcommand = subcommand
        self.exit_code = exit_code

    def to_dict(self):
        rv = super().to_dict()
        rv['subcommand'] = self.subcommand
        rv['exit_code'] = self.exit_code
        return rv


class MetadataInconsistentError(DnssecError):
    """DNSSEC metadata exists for a domain but no utility is configured"""
    code = "metadata_inconsistent"


class InvalidZoneNameError(DnssecError):
    code = "invalid_zone_name"


class DomainNotFoundError(DnssecError):
    code = "domain_not_found"


class DatabaseError(DnssecError):
    code = "database_error"


# Static messages shown to the user
ERR_EXEC_NOT_ALLOWED = "Process execution is disabled. Set PDNSSEC_EXEC_ENABLED to allow calling the DNSSEC utility."
ERR_EXEC_PDNSSEC = "Failed to call the DNSSEC utility. Check that PDNSSEC_COMMAND points to an executable pdnssec/pdnsutil binary."
ERR_EXEC_PDNSSEC_SECURE_ZONE = "Failed to secure zone."
ERR_EXEC_PDNSSEC_DISABLE_ZONE = "Failed to disable DNSSEC."
ERR_EXEC_PDNSSEC_SHOW_ZONE = "Failed to get DNSSEC status of zone."
ERR_EXEC_PDNSSEC_RECTIFY_ZONE = "Failed to rectify zone."
ERR_INVALID_ZONE_NAME = "Invalid zone name"
ERR_DOMAIN_NOT_FOUND = "Domain not found"
