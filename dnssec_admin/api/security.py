"""
API key authentication for the DNSSEC zone API
"""

from flask import request, abort
from functools import wraps
import logging
import os
import time
import hmac
import hashlib
import uuid

logger = logging.getLogger(__name__)


def parse_api_key_entry(value):
    """
    Parse an API key definition of the form key:client_id:client_name:secret_key

    Returns:
        tuple: (key, client info dict) or None if malformed
    """
    parts = value.split(':')
    if len(parts) < 4:
        return None
    key, client_id, client_name, secret_key = parts[:4]
    return key, {
        'id': client_id,
        'name': client_name,
        'secret_key': secret_key
    }


def compute_signature(secret_key, timestamp, nonce, api_key, method, path, args):
    """HMAC-SHA256 over timestamp, nonce, key, method, path and sorted query string"""
    query_string = '&'.join(f"{k}={v}" for k, v in sorted(args.items()))
    msg = f"{timestamp}{nonce}{api_key}{method}{path}{query_string}"
    return hmac.new(secret_key.encode(), msg.encode(), hashlib.sha256).hexdigest()


class ApiSecurity:
    """
    Validates the X-API-Key header and, when API_SIGNING_REQUIRED is set,
    the X-API-Signature / X-API-Timestamp / X-API-Nonce headers.
    """

    def __init__(self, app=None):
        self.api_keys = {}
        self.signing_required = False
        self.signature_ttl = 300

        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.api_keys = app.config.get('API_KEYS', {})
        self.signing_required = app.config.get('API_SIGNING_REQUIRED', False)
        self.signature_ttl = app.config.get('API_SIGNATURE_TTL', 300)
        app.extensions['api_security'] = self

    def require_api_key(self, f):
        """Decorator rejecting requests without a valid API key"""
        @wraps(f)
        def decorated(*args, **kwargs):
            api_key = request.headers.get('X-API-Key')

            if not api_key:
                logger.warning("API request without API key")
                abort(401, "API key required")

            client_info = self.api_keys.get(api_key)
            if client_info is None:
                logger.warning(f"Invalid API key: {api_key[:8]}...")
                abort(401, "Invalid API key")

            if self.signing_required:
                self._validate_signature(api_key, client_info)

            request.client_id = client_info.get('id')
            request.client_name = client_info.get('name')
            logger.info(f"API request authenticated for client: {request.client_name}")

            return f(*args, **kwargs)
        return decorated

    def _validate_signature(self, api_key, client_info):
        signature = request.headers.get('X-API-Signature')
        timestamp = request.headers.get('X-API-Timestamp')
        nonce = request.headers.get('X-API-Nonce')

        if not all([signature, timestamp, nonce]):
            logger.warning("Missing signature headers")
            abort(401, "Request signature required")

        try:
            request_time = int(timestamp)
        except ValueError:
            logger.warning(f"Invalid timestamp: {timestamp}")
            abort(401, "Invalid timestamp format")

        if abs(int(time.time()) - request_time) > self.signature_ttl:
            logger.warning(f"Request timestamp expired: {request_time}")
            abort(401, "Request timestamp expired")

        secret_key = client_info.get('secret_key')
        if not secret_key:
            logger.error(f"No secret key configured for API key: {api_key[:8]}...")
            abort(500, "API configuration error")

        expected = compute_signature(
            secret_key, timestamp, nonce, api_key,
            request.method, request.path, request.args
        )
        if not hmac.compare_digest(signature, expected):
            logger.warning("Invalid request signature")
            abort(401, "Invalid request signature")

    @staticmethod
    def generate_client_credentials(client_name):
        return {
            "client_id": str(uuid.uuid4()),
            "client_name": client_name,
            "api_key": str(uuid.uuid4()),
            "secret_key": str(uuid.uuid4()),
            "created_at": int(time.time())
        }


api_security = ApiSecurity()


def init_security(app):
    """
    Load API keys from API_KEY_* environment variables and the app config

    Args:
        app: Flask application instance
    """
    api_keys = {}

    # Format: API_KEY_NAME=key:client_id:client_name:secret_key
    for env_var, value in os.environ.items():
        if not env_var.startswith('API_KEY_'):
            continue
        entry = parse_api_key_entry(value)
        if entry is None:
            app.logger.error(f"Ignoring malformed API key definition in {env_var}")
            continue
        api_keys[entry[0]] = entry[1]

    api_keys.update(app.config.get('API_KEYS') or {})

    if not api_keys and app.debug:
        app.logger.warning("No API keys defined. Creating a development key.")
        credentials = api_security.generate_client_credentials("development")
        api_keys[credentials["api_key"]] = {
            'id': credentials["client_id"],
            'name': credentials["client_name"],
            'secret_key': credentials["secret_key"]
        }
        app.logger.info(f"Development API Key: {credentials['api_key']}")

    app.config['API_KEYS'] = api_keys
    api_security.init_app(app)

    app.logger.info(f"Loaded {len(api_keys)} API keys")


def generate_api_client(name):
    """
    Generate new API client credentials in the API_KEY_* environment format

    Args:
        name: Client name

    Returns:
        tuple: (credentials dict, environment variable line)
    """
    credentials = api_security.generate_client_credentials(name)
    env_line = (
        f"API_KEY_{name.upper()}={credentials['api_key']}:{credentials['client_id']}:"
        f"{credentials['client_name']}:{credentials['secret_key']}"
    )
    return credentials, env_line
