import unittest

from dnssec_admin.dnssec.errors import InvalidZoneNameError
from dnssec_admin.utils.dns_utils import normalize_zone_name, is_valid_zone_name


class TestZoneNames(unittest.TestCase):
    def test_plain_zone(self):
        self.assertEqual(normalize_zone_name("example.com"), "example.com")

    def test_trailing_dot_and_case(self):
        self.assertEqual(normalize_zone_name("Sub.Example.COM."), "sub.example.com")

    def test_reverse_zone(self):
        self.assertEqual(normalize_zone_name("2.0.192.in-addr.arpa"), "2.0.192.in-addr.arpa")

    def test_idn_zone(self):
        self.assertEqual(normalize_zone_name("bücher.example"), "xn--bcher-kva.example")

    def test_rejects_shell_metacharacters(self):
        for name in ['example.com; rm -rf /', 'example.com && id', '$(id).example.com',
                     'example.com|cat', '`id`.example.com', 'exa mple.com']:
            with self.subTest(name=name):
                self.assertFalse(is_valid_zone_name(name))

    def test_rejects_option_like_names(self):
        self.assertFalse(is_valid_zone_name("--help"))
        self.assertFalse(is_valid_zone_name("-x.example.com"))

    def test_rejects_empty_and_malformed(self):
        for name in [None, "", "example..com", "localhost", "a" * 64 + ".com", 42]:
            with self.subTest(name=name):
                self.assertFalse(is_valid_zone_name(name))

    def test_error_message(self):
        with self.assertRaises(InvalidZoneNameError) as cm:
            normalize_zone_name("bad zone")
        self.assertIn("Invalid zone name", cm.exception.message)


if __name__ == '__main__':
    unittest.main()
