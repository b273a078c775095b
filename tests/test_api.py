import tempfile
import unittest
from unittest.mock import patch

from dnssec_admin.app import create_app
from dnssec_admin.database.init import create_tables
from dnssec_admin.database.models import db, Domain, DomainMetadata
from stubs import make_stub

API_KEY = "test-api-key"
HEADERS = {"X-API-Key": API_KEY}


def make_app(command=None):
    return create_app({
        "TESTING": True,
        "DEBUG": False,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "RATELIMIT_ENABLED": False,
        "LOG_DIR": "",
        "PDNSSEC_COMMAND": command,
        "PDNSSEC_EXEC_ENABLED": True,
        "API_KEYS": {
            API_KEY: {"id": "test-client", "name": "Test Client", "secret_key": "test-secret-key"}
        },
    })


class ApiTestCase(unittest.TestCase):
    exit_code = 0
    configured = True

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

        command = make_stub(self.tmp.name, exit_code=self.exit_code) if self.configured else None
        self.app = make_app(command)
        self.client = self.app.test_client()

        create_tables(self.app)
        with self.app.app_context():
            db.session.add(Domain(id=1, name="example.com", type="NATIVE"))
            db.session.add(Domain(id=2, name="example.org", type="NATIVE"))
            db.session.add(DomainMetadata(domain_id=2, kind="PRESIGNED", content="0"))
            db.session.commit()


class TestAuthentication(ApiTestCase):
    def test_missing_api_key(self):
        response = self.client.post("/api/v1/zones/example.com/dnssec")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["status"], "error")

    def test_invalid_api_key(self):
        response = self.client.post("/api/v1/zones/example.com/dnssec", headers={"X-API-Key": "nope"})
        self.assertEqual(response.status_code, 401)

    def test_health_needs_no_key(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.get_json()["dnssec_utility_configured"])


class TestZoneEndpoints(ApiTestCase):
    def test_tool_available(self):
        response = self.client.get("/api/v1/dnssec/tool", headers=HEADERS)
        data = response.get_json()["data"]
        self.assertTrue(data["available"])
        self.assertIsNone(data["message"])

    def test_secure_zone(self):
        response = self.client.post("/api/v1/zones/example.com/dnssec", headers=HEADERS)
        body = response.get_json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["status"], "success")
        self.assertEqual(body["zone"], "example.com")
        self.assertEqual(body["endpoint"], "secure-zone")
        self.assertTrue(body["data"]["secured"])
        self.assertEqual(body["data"]["output"], ["secure-zone", "example.com"])

    def test_disable_zone(self):
        response = self.client.delete("/api/v1/zones/example.com/dnssec", headers=HEADERS)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["data"]["output"], ["disable-dnssec", "example.com"])

    def test_zone_status_uses_show_zone(self):
        response = self.client.get("/api/v1/zones/example.com/dnssec", headers=HEADERS)
        data = response.get_json()["data"]

        self.assertEqual(response.status_code, 200)
        self.assertTrue(data["secured"])
        self.assertEqual(data["output"], ["show-zone", "example.com"])

    @patch('dnssec_admin.dnssec.runner.subprocess.run')
    def test_invalid_zone_name(self, mock_run):
        response = self.client.post("/api/v1/zones/example.com;id/dnssec", headers=HEADERS)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["code"], "invalid_zone_name")
        mock_run.assert_not_called()

    def test_rectify_zone(self):
        response = self.client.post("/api/v1/domains/1/rectify", headers=HEADERS)
        data = response.get_json()["data"]

        self.assertEqual(response.status_code, 200)
        self.assertTrue(data["rectified"])
        self.assertEqual(data["output"], ["rectify-zone", "example.com"])

    def test_rectify_unknown_domain(self):
        response = self.client.post("/api/v1/domains/42/rectify", headers=HEADERS)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json()["code"], "domain_not_found")


class TestFailingUtility(ApiTestCase):
    exit_code = 1

    def test_secure_zone_failure(self):
        response = self.client.post("/api/v1/zones/example.com/dnssec", headers=HEADERS)
        body = response.get_json()

        self.assertEqual(response.status_code, 502)
        self.assertEqual(body["message"], "Failed to secure zone.")
        self.assertEqual(body["code"], "command_failed")

    def test_rectify_failure(self):
        response = self.client.post("/api/v1/domains/1/rectify", headers=HEADERS)
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.get_json()["message"], "Failed to rectify zone.")


class TestUnconfiguredUtility(ApiTestCase):
    configured = False

    def test_tool_unavailable(self):
        response = self.client.get("/api/v1/dnssec/tool", headers=HEADERS)
        data = response.get_json()["data"]
        self.assertFalse(data["configured"])
        self.assertFalse(data["available"])

    def test_secure_zone_unavailable(self):
        response = self.client.post("/api/v1/zones/example.com/dnssec", headers=HEADERS)
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.get_json()["code"], "tool_unavailable")

    def test_rectify_without_metadata_is_noop(self):
        response = self.client.post("/api/v1/domains/1/rectify", headers=HEADERS)
        data = response.get_json()["data"]

        self.assertEqual(response.status_code, 200)
        self.assertFalse(data["rectified"])
        self.assertEqual(data["output"], [])

    def test_rectify_with_metadata_is_conflict(self):
        response = self.client.post("/api/v1/domains/2/rectify", headers=HEADERS)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json()["code"], "metadata_inconsistent")


if __name__ == '__main__':
    unittest.main()
