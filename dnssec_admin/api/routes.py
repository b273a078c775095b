from flask import Blueprint, jsonify, current_app
import logging
from datetime import datetime
from functools import wraps

from dnssec_admin.api.errors import api_error_from
from dnssec_admin.api.security import api_security
from dnssec_admin.database.service import ZoneRepository
from dnssec_admin.dnssec.runner import CommandRunner
from dnssec_admin.dnssec.zones import DnssecService

# Configure logging
logger = logging.getLogger(__name__)

# Create blueprint for API routes
api_bp = Blueprint('api', __name__, url_prefix='/api/v1')

def get_dnssec_service():
    """Build the zone operation service from the current app config"""
    runner = CommandRunner.from_config(current_app.config)
    return DnssecService(runner, ZoneRepository())

def format_api_response(status, data=None, zone=None, endpoint=None):
    """
    Create a standardized API response format
    """
    response = {
        "status": status,
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }

    if zone:
        response["zone"] = zone

    if endpoint:
        response["endpoint"] = endpoint

    if data is not None:
        response["data"] = data

    return response

def format_response(endpoint_name):
    """
    Decorator turning the raw data returned by an endpoint into a success response
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            result = f(*args, **kwargs)

            # Responses and (body, status) tuples pass through
            if isinstance(result, tuple) or hasattr(result, 'status_code'):
                return result

            return jsonify(format_api_response(
                status="success",
                data=result,
                zone=kwargs.get('zone'),
                endpoint=endpoint_name
            ))
        return wrapper
    return decorator

def raise_for_result(result):
    """Raise the API error for a failed operation result that carries an error"""
    if result.error is not None:
        raise api_error_from(result.error)

@api_bp.route('/dnssec/tool', methods=['GET'])
@api_security.require_api_key
@format_response('tool')
def tool_endpoint():
    """Report whether the DNSSEC utility can be called"""
    runner = CommandRunner.from_config(current_app.config)
    error = runner.availability_error()

    return {
        "configured": runner.configured,
        "exec_enabled": runner.exec_enabled,
        "available": error is None,
        "message": error.message if error else None
    }

@api_bp.route('/zones/<zone>/dnssec', methods=['POST'])
@api_security.require_api_key
@format_response('secure-zone')
def secure_zone_endpoint(zone):
    """Secure a zone with DNSSEC"""
    logger.info(f"secure-zone requested for zone: {zone}")

    result = get_dnssec_service().secure_zone(zone)
    raise_for_result(result)

    return {"secured": True, "output": list(result.output)}

@api_bp.route('/zones/<zone>/dnssec', methods=['DELETE'])
@api_security.require_api_key
@format_response('disable-dnssec')
def disable_zone_endpoint(zone):
    """Disable DNSSEC for a zone"""
    logger.info(f"disable-dnssec requested for zone: {zone}")

    result = get_dnssec_service().disable_zone(zone)
    raise_for_result(result)

    return {"secured": False, "output": list(result.output)}

@api_bp.route('/zones/<zone>/dnssec', methods=['GET'])
@api_security.require_api_key
@format_response('zone-status')
def zone_status_endpoint(zone):
    """Get the DNSSEC status of a zone"""
    logger.info(f"DNSSEC status requested for zone: {zone}")

    result = get_dnssec_service().zone_secured(zone)
    raise_for_result(result)

    return {"secured": result.success, "output": list(result.output)}

@api_bp.route('/domains/<int:domain_id>/rectify', methods=['POST'])
@api_security.require_api_key
@format_response('rectify-zone')
def rectify_zone_endpoint(domain_id):
    """Rectify the zone of a domain"""
    logger.info(f"rectify-zone requested for domain: {domain_id}")

    result = get_dnssec_service().rectify_zone(domain_id)
    raise_for_result(result)

    return {
        "domain_id": domain_id,
        "rectified": result.success,
        "output": list(result.output)
    }
