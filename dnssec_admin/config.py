# DNSSEC Zone API Configuration
# dnssec_admin/config.py

import os

def env_bool(name, default):
    """Read a boolean environment variable ("true", "1", "t" are true)"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "t", "yes")

def env_float(name):
    """Read an optional float environment variable, None if unset or empty"""
    value = os.environ.get(name)
    if not value:
        return None
    return float(value)

class Config:
    """Base configuration for the application"""
    # Application settings
    APP_NAME = "DNSSEC Zone API"
    VERSION = "1.0.0"
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")

    # Logging settings
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_DIR = os.environ.get("LOG_DIR", "")  # empty: console logging only

    # DNSSEC utility settings
    # Path to pdnssec (PowerDNS 3.x) or pdnsutil (PowerDNS 4+); unset disables DNSSEC operations
    PDNSSEC_COMMAND = os.environ.get("PDNSSEC_COMMAND") or None
    PDNSSEC_EXEC_ENABLED = env_bool("PDNSSEC_EXEC_ENABLED", True)
    PDNSSEC_TIMEOUT = env_float("PDNSSEC_TIMEOUT")  # None: wait for the utility to exit

    # Database settings, URI is built from DatabaseConfig when unset
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Security settings
    API_SIGNING_REQUIRED = False  # Whether to require request signing
    API_SIGNATURE_TTL = 300  # Time window for signature validation (seconds)

    # CORS settings
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Rate limiting
    RATELIMIT_STORAGE_URI = os.environ.get("REDIS_URL", "memory://")
    RATELIMIT_DEFAULT = "200 per day;50 per hour"
    RATELIMIT_HEADERS_ENABLED = True

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = "DEBUG"

    # Development rate limits
    RATELIMIT_DEFAULT = "1000 per day;200 per hour"

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True

    RATELIMIT_ENABLED = False  # Disable rate limiting in tests
    LOG_DIR = ""

    # Use in-memory database for testing
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"

    # Tests configure their own stub utility
    PDNSSEC_COMMAND = None

    # Mock API keys
    API_KEYS = {
        "test-api-key": {
            "id": "test-client",
            "name": "Test Client",
            "secret_key": "test-secret-key"
        }
    }

class ProductionConfig(Config):
    """Production configuration"""
    SECRET_KEY = os.environ.get("SECRET_KEY")

    # Stricter security settings
    API_SIGNING_REQUIRED = env_bool("API_SIGNING_REQUIRED", True)

    # More restrictive CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "")

    LOG_DIR = os.environ.get("LOG_DIR", "/var/log/dnssec-admin")

# Select configuration based on environment
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig
}

# Helper function to get config
def get_config():
    env = os.environ.get("FLASK_ENV", "default")
    return config.get(env, config["default"])
