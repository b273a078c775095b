import os
import time
import unittest
from unittest.mock import patch

from dnssec_admin.api.security import compute_signature, generate_api_client, parse_api_key_entry
from dnssec_admin.app import create_app

API_KEY = "signed-key"
SECRET = "signed-secret"


class TestApiKeyParsing(unittest.TestCase):
    def test_parse_entry(self):
        key, info = parse_api_key_entry("abc:client-1:Billing:s3cret")
        self.assertEqual(key, "abc")
        self.assertEqual(info, {"id": "client-1", "name": "Billing", "secret_key": "s3cret"})

    def test_parse_malformed_entry(self):
        self.assertIsNone(parse_api_key_entry("abc:client-1"))

    def test_generate_api_client(self):
        credentials, env_line = generate_api_client("ops")
        self.assertEqual(credentials["client_name"], "ops")
        self.assertTrue(env_line.startswith(f"API_KEY_OPS={credentials['api_key']}:"))

    def test_keys_loaded_from_environment(self):
        with patch.dict(os.environ, {"API_KEY_OPS": "env-key:ops-id:Ops:env-secret"}):
            app = create_app({
                "TESTING": True,
                "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
                "RATELIMIT_ENABLED": False,
                "LOG_DIR": "",
                "API_KEYS": {},
            })
        self.assertIn("env-key", app.config["API_KEYS"])


class TestRequestSigning(unittest.TestCase):
    def setUp(self):
        self.app = create_app({
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "RATELIMIT_ENABLED": False,
            "LOG_DIR": "",
            "API_SIGNING_REQUIRED": True,
            "API_KEYS": {API_KEY: {"id": "c", "name": "Signed Client", "secret_key": SECRET}},
        })
        self.client = self.app.test_client()

    def headers(self, timestamp=None, signature=None):
        timestamp = str(timestamp or int(time.time()))
        nonce = "n-1"
        if signature is None:
            signature = compute_signature(SECRET, timestamp, nonce, API_KEY, "GET", "/api/v1/dnssec/tool", {})
        return {
            "X-API-Key": API_KEY,
            "X-API-Timestamp": timestamp,
            "X-API-Nonce": nonce,
            "X-API-Signature": signature,
        }

    def test_valid_signature(self):
        response = self.client.get("/api/v1/dnssec/tool", headers=self.headers())
        self.assertEqual(response.status_code, 200)

    def test_missing_signature(self):
        response = self.client.get("/api/v1/dnssec/tool", headers={"X-API-Key": API_KEY})
        self.assertEqual(response.status_code, 401)

    def test_bad_signature(self):
        response = self.client.get("/api/v1/dnssec/tool", headers=self.headers(signature="0" * 64))
        self.assertEqual(response.status_code, 401)

    def test_expired_timestamp(self):
        response = self.client.get("/api/v1/dnssec/tool", headers=self.headers(timestamp=int(time.time()) - 3600))
        self.assertEqual(response.status_code, 401)


if __name__ == '__main__':
    unittest.main()
