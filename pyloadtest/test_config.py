"""
Unit tests for config module
"""
import unittest
from pyloadtest.config import LoadTestConfig, validate_url


class TestValidateUrl(unittest.TestCase):
    """Test validate_url function"""

    def test_accepts_http_and_https(self):
        self.assertEqual(validate_url('http://example.com/'), 'http://example.com/')
        self.assertEqual(validate_url('https://example.com:8443/path?q=1'),
                         'https://example.com:8443/path?q=1')

    def test_rejects_missing_scheme(self):
        with self.assertRaises(ValueError):
            validate_url('example.com/path')

    def test_rejects_other_schemes(self):
        with self.assertRaises(ValueError):
            validate_url('ftp://example.com/file')

    def test_rejects_missing_host(self):
        with self.assertRaises(ValueError):
            validate_url('http://')

    def test_rejects_garbage(self):
        with self.assertRaises(ValueError):
            validate_url('not a url')


class TestLoadTestConfig(unittest.TestCase):
    """Test LoadTestConfig class"""

    def test_default_config(self):
        config = LoadTestConfig('http://example.com/')
        self.assertEqual(config.concurrency, 1)
        self.assertEqual(config.requests, 1000)
        self.assertEqual(config.requests_per_worker, 1000)

    def test_requests_per_worker_truncates(self):
        config = LoadTestConfig('http://example.com/', concurrency=3, requests=10)
        self.assertEqual(config.requests_per_worker, 3)

    def test_fewer_requests_than_workers(self):
        config = LoadTestConfig('http://example.com/', concurrency=8, requests=5)
        self.assertEqual(config.requests_per_worker, 0)

    def test_zero_requests_allowed(self):
        config = LoadTestConfig('http://example.com/', requests=0)
        self.assertEqual(config.requests_per_worker, 0)

    def test_rejects_zero_concurrency(self):
        with self.assertRaises(ValueError):
            LoadTestConfig('http://example.com/', concurrency=0)

    def test_rejects_negative_requests(self):
        with self.assertRaises(ValueError):
            LoadTestConfig('http://example.com/', requests=-1)

    def test_rejects_invalid_url(self):
        with self.assertRaises(ValueError):
            LoadTestConfig('localhost:8080')


if __name__ == '__main__':
    unittest.main()
