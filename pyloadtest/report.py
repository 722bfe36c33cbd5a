"""
Plain text report of a Summary
"""
from .chart import Chart
from .stats import to_ms


def format_report(summary, wall_time_ns=None, chart=None):
    """
    Render a Summary as the text printed at the end of a run

    Args:
        summary: stats.Summary
        wall_time_ns: Optional duration of the measurement phase, adds throughput
        chart: Optional Chart used for both bar charts

    Returns:
        Multi-line report string
    """
    chart = chart or Chart()
    lines = [
        "Summary",
        f"  Average:   {to_ms(summary.average):.2f} ms",
        f"  Median:    {to_ms(summary.median):.2f} ms",
        f"  Longest:   {to_ms(summary.max):.2f} ms",
        f"  Shortest:  {to_ms(summary.min):.2f} ms",
        f"  Requests:  {summary.count}",
        "",
        "Latency Percentiles (2% of requests per bar):",
        chart.make([to_ms(d) for d in summary.percentiles]),
        "",
        "Latency Histogram (each bar is 2% of max latency):",
        chart.make(summary.histogram),
        "",
        f"Transferred: {summary.transferred}",
    ]

    if summary.status_codes:
        lines.append("Status codes:")
        for status_code, count in summary.status_codes:
            lines.append(f"  {status_code}: {count}")

    if wall_time_ns is not None:
        wall_sec = wall_time_ns / 1e9
        rps = summary.count / wall_sec if wall_sec > 0 else 0
        lines.append(f"Wall Clock Time: {wall_sec:.2f} sec")
        lines.append(f"Throughput:      {rps:.2f} req/sec")

    return '\n'.join(lines)
