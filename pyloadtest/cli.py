import argparse
import logging
import sys

import requests

from .config import LoadTestConfig, DEFAULT_CONCURRENCY, DEFAULT_REQUESTS
from .performance import run_load_test
from .report import format_report
from .stats import summarize

logger = logging.getLogger('pyloadtest.cli')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pyloadtest',
        description='Send GET requests to a URL from parallel workers and report latency')
    parser.add_argument('url', metavar='URL', help='Target URL')
    parser.add_argument('-c', '--concurrency', type=int, default=DEFAULT_CONCURRENCY,
                        help='Number of parallel workers (default: %(default)s)')
    parser.add_argument('-n', '--requests', type=int, default=DEFAULT_REQUESTS,
                        help='Total number of requests (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        config = LoadTestConfig(args.url, concurrency=args.concurrency, requests=args.requests)
    except ValueError as e:
        parser.error(str(e))

    try:
        run = run_load_test(config)
    except requests.exceptions.RequestException as e:
        logger.error(f"Load test against {config.url} aborted: {e}")
        sys.exit(1)

    print(format_report(summarize(run.facts), wall_time_ns=run.wall_time_ns))


if __name__ == "__main__":
    main()
