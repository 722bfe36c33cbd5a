import time
import threading
import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION

import requests

from .content_length import ContentLength
from .stats import Fact

logger = logging.getLogger('pyloadtest.performance')

# Facts joined in worker order, plus how long the measurement phase took
LoadTestRun = namedtuple('LoadTestRun', ['facts', 'wall_time_ns'])


def run_worker(url, number_of_requests, abort=None):
    """
    Warm up one connection, then issue timed GET requests one at a time

    Args:
        url: Target URL
        number_of_requests: How many timed requests this worker makes
        abort: Optional threading.Event; when set the worker stops early

    Returns:
        List of Fact in the order the requests completed

    Raises:
        requests.exceptions.RequestException: warm-up or any request failed
    """
    facts = []
    with requests.Session() as session:
        try:
            session.get(url)
        except requests.exceptions.RequestException as e:
            logger.error(f"Failure to warm connection to {url}: {e}")
            raise

        for i in range(number_of_requests):
            if abort is not None and abort.is_set():
                logger.debug(f"Worker stopping after {i} requests, run aborted")
                break
            start = time.perf_counter_ns()
            response = session.get(url)
            duration = time.perf_counter_ns() - start
            facts.append(Fact(
                status_code=response.status_code,
                duration=duration,
                content_length=ContentLength(len(response.content)),
            ))

    logger.debug(f"Worker finished {len(facts)} requests")
    return facts


def run_load_test(config):
    """
    Spread the configured requests over a fixed pool of worker threads

    Each worker gets config.requests_per_worker requests. The first failure
    in any worker aborts the run and is re-raised here; nothing partial is
    returned.

    Args:
        config: LoadTestConfig

    Returns:
        LoadTestRun with the facts of every worker, concatenated in worker order
    """
    share = config.requests_per_worker
    logger.info(f"Running {share * config.concurrency} requests against {config.url} "
                f"with {config.concurrency} worker(s), {share} each")

    abort = threading.Event()
    wall_start = time.perf_counter_ns()

    with ThreadPoolExecutor(max_workers=config.concurrency,
                            thread_name_prefix='pyloadtest-worker') as executor:
        futures = [executor.submit(run_worker, config.url, share, abort)
                   for _ in range(config.concurrency)]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            if future in done and future.exception() is not None:
                abort.set()
                for pending in futures:
                    pending.cancel()
                logger.error(f"Worker failed, aborting run: {future.exception()}")
                raise future.exception()

    wall_time_ns = time.perf_counter_ns() - wall_start

    facts = []
    for future in futures:
        facts.extend(future.result())

    logger.info(f"Completed {len(facts)} requests in {wall_time_ns / 1e9:.2f} sec")
    return LoadTestRun(facts=facts, wall_time_ns=wall_time_ns)
