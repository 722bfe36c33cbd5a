"""
Run configuration for a load test
"""
import logging
from urllib.parse import urlparse

from requests.exceptions import RequestException
from requests.models import PreparedRequest

logger = logging.getLogger('pyloadtest.config')

DEFAULT_CONCURRENCY = 1
DEFAULT_REQUESTS = 1000


def validate_url(url):
    """
    Check that url is an absolute http(s) URL that requests can send to

    Raises:
        ValueError: url is malformed or not http/https
    """
    scheme = urlparse(url).scheme.lower()
    if scheme not in ('http', 'https'):
        raise ValueError(f"Invalid url {url!r}: expected an absolute http or https URL")
    try:
        PreparedRequest().prepare_url(url, None)
    except RequestException as e:
        raise ValueError(f"Invalid url {url!r}: {e}") from e
    return url


class LoadTestConfig:
    """Settings for one load test run"""
    def __init__(self, url, concurrency=DEFAULT_CONCURRENCY, requests=DEFAULT_REQUESTS):
        """
        Args:
            url: Target URL, every request is a GET against it
            concurrency: Number of parallel workers (default: 1)
            requests: Total number of timed requests (default: 1000)
        """
        if int(concurrency) < 1:
            raise ValueError(f"Concurrency must be at least 1, got {concurrency}")
        if int(requests) < 0:
            raise ValueError(f"Number of requests cannot be negative, got {requests}")
        self.url = validate_url(url)
        self.concurrency = int(concurrency)
        self.requests = int(requests)

        if self.requests % self.concurrency:
            logger.debug(f"{self.requests % self.concurrency} request(s) do not divide "
                         f"evenly over {self.concurrency} workers and will not be issued")

    @property
    def requests_per_worker(self):
        """Share of each worker; the remainder of requests / concurrency is dropped"""
        return self.requests // self.concurrency

    def __repr__(self):
        return (f"LoadTestConfig(url={self.url!r}, concurrency={self.concurrency}, "
                f"requests={self.requests})")
