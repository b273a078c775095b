import re
import dns.name
import dns.exception
import logging

from dnssec_admin.dnssec.errors import InvalidZoneNameError, ERR_INVALID_ZONE_NAME

logger = logging.getLogger(__name__)

# Hostname-style labels, letters digits and hyphens only
ZONE_PATTERN = re.compile(
    r'^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$',
    re.IGNORECASE
)

def normalize_zone_name(zone_name):
    """
    Validate a zone name and return it in the form passed to the DNSSEC utility.

    Internationalized names are converted to their IDNA (xn--) form and a
    trailing dot is dropped.

    Args:
        zone_name (str): Zone name to check

    Returns:
        str: Normalized zone name

    Raises:
        InvalidZoneNameError: If the name is empty or not a valid zone name
    """
    if not zone_name or not isinstance(zone_name, str):
        raise InvalidZoneNameError(f"{ERR_INVALID_ZONE_NAME}: name is required")

    try:
        name = dns.name.from_text(zone_name.strip())
    except (dns.exception.DNSException, UnicodeError) as e:
        logger.warning(f"Rejected zone name {zone_name!r}: {str(e)}")
        raise InvalidZoneNameError(f"{ERR_INVALID_ZONE_NAME}: {zone_name}")

    text = name.to_text(omit_final_dot=True)
    if not ZONE_PATTERN.match(text):
        logger.warning(f"Rejected zone name {zone_name!r}")
        raise InvalidZoneNameError(f"{ERR_INVALID_ZONE_NAME}: {zone_name}")

    return text.lower()

def is_valid_zone_name(zone_name):
    """
    Check if a zone name is acceptable

    Args:
        zone_name (str): Zone name to check

    Returns:
        bool: True if the name is valid
    """
    try:
        normalize_zone_name(zone_name)
        return True
    except InvalidZoneNameError:
        return False
