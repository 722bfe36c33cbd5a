"""
Latency statistics for a load test run

Durations are integer nanoseconds throughout, so averages and medians
truncate the same way regardless of how large the run gets. Conversion to
milliseconds only happens for display (see to_ms).
"""
from collections import Counter, namedtuple

from .content_length import ContentLength

# Number of bars in both the percentile and the histogram series
BUCKETS = 50

NANOS_PER_MS = 1000000

# One completed request, recorded by the worker that issued it
Fact = namedtuple('Fact', ['status_code', 'duration', 'content_length'])

Summary = namedtuple('Summary', [
    'count',
    'average',
    'median',
    'min',
    'max',
    'percentiles',
    'histogram',
    'transferred',
    'status_codes',
])


def to_ms(duration):
    """ Convert an integer nanosecond duration to float milliseconds """
    return duration / float(NANOS_PER_MS)


def zero_summary():
    return Summary(
        count=0,
        average=0,
        median=0,
        min=0,
        max=0,
        percentiles=(0,) * BUCKETS,
        histogram=(0,) * BUCKETS,
        transferred=ContentLength.zero(),
        status_codes=(),
    )


def median(sorted_durations):
    """ Middle element for odd counts, truncated mean of the middle pair for even """
    middle = len(sorted_durations) // 2
    if len(sorted_durations) % 2 == 0:
        return (sorted_durations[middle - 1] + sorted_durations[middle]) // 2
    return sorted_durations[middle]


def percentiles(sorted_durations, buckets=BUCKETS):
    """
    Sample the sorted durations at fixed 100/buckets percent steps

    Slot i holds sorted[floor(i / buckets * count)], so with fewer samples
    than buckets neighbouring slots repeat the same value.
    """
    count = len(sorted_durations)
    result = []
    for i in range(buckets):
        index = min(max(i * count // buckets, 0), count - 1)
        result.append(sorted_durations[index])
    return tuple(result)


def latency_histogram(durations, longest, buckets=BUCKETS):
    """
    Count durations into equal width buckets spanning [0, longest]

    The bucket index is floor(d / (longest / buckets)), done in integers.
    The longest duration itself lands in the last bucket. When every
    duration is zero all of them go to bucket 0.
    """
    histogram = [0] * buckets
    for duration in durations:
        if longest == 0:
            index = 0
        else:
            index = min(duration * buckets // longest, buckets - 1)
        histogram[index] += 1
    return tuple(histogram)


def summarize(facts):
    """
    Reduce a sequence of Facts to a Summary

    Args:
        facts: sequence of Fact, in any worker order

    Returns:
        Summary with integer nanosecond durations
    """
    if not facts:
        return zero_summary()

    count = len(facts)
    durations = sorted(f.duration for f in facts)

    transferred = sum((f.content_length for f in facts), ContentLength.zero())
    status_codes = tuple(sorted(Counter(f.status_code for f in facts).items()))

    return Summary(
        count=count,
        average=sum(durations) // count,
        median=median(durations),
        min=durations[0],
        max=durations[-1],
        percentiles=percentiles(durations),
        histogram=latency_histogram(durations, durations[-1]),
        transferred=transferred,
        status_codes=status_codes,
    )
