"""
Unit tests for report module
"""
import unittest
from pyloadtest.content_length import ContentLength
from pyloadtest.report import format_report
from pyloadtest.stats import Fact, summarize

MS = 1000000


class TestFormatReport(unittest.TestCase):

    def setUp(self):
        self.summary = summarize([
            Fact(200, 10 * MS, ContentLength(600)),
            Fact(200, 20 * MS, ContentLength(600)),
            Fact(404, 30 * MS, ContentLength(0)),
        ])

    def test_lists_timings_in_order(self):
        lines = format_report(self.summary).split('\n')
        self.assertEqual(lines[:6], [
            "Summary",
            "  Average:   20.00 ms",
            "  Median:    20.00 ms",
            "  Longest:   30.00 ms",
            "  Shortest:  10.00 ms",
            "  Requests:  3",
        ])

    def test_percentiles_before_histogram(self):
        report = format_report(self.summary)
        self.assertLess(report.index("Latency Percentiles (2% of requests per bar):"),
                        report.index("Latency Histogram (each bar is 2% of max latency):"))
        self.assertIn("30.00 |", report)

    def test_transferred_and_status_codes(self):
        report = format_report(self.summary)
        self.assertIn("Transferred: 1.17 KB", report)
        self.assertIn("Status codes:\n  200: 2\n  404: 1", report)

    def test_throughput_only_with_wall_time(self):
        self.assertNotIn("Throughput", format_report(self.summary))
        report = format_report(self.summary, wall_time_ns=2 * 1000 * MS)
        self.assertIn("Wall Clock Time: 2.00 sec", report)
        self.assertIn("Throughput:      1.50 req/sec", report)

    def test_empty_summary(self):
        report = format_report(summarize([]))
        self.assertIn("  Requests:  0", report)
        self.assertIn("Transferred: 0 B", report)
        self.assertNotIn("Status codes:", report)


if __name__ == '__main__':
    unittest.main()
