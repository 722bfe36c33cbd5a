"""
Content length of an HTTP response body

A ContentLength is a scalar count of the bytes (octets) in a response
payload, not including headers. It renders itself in B/KB/MB/GB tiers.
"""
import functools

KILO = 1024
MEGS = 1024 * 1024
GIGS = 1024 * 1024 * 1024


@functools.total_ordering
class ContentLength:
    """Non-negative byte count with human readable formatting"""
    __slots__ = ('_bytes',)

    def __init__(self, nbytes=0):
        nbytes = int(nbytes)
        if nbytes < 0:
            raise ValueError(f"Content length cannot be negative: {nbytes}")
        self._bytes = nbytes

    @classmethod
    def zero(cls):
        """Returns a zero length content length"""
        return cls(0)

    def bytes(self):
        """Returns the bytes associated with the content length"""
        return self._bytes

    def __add__(self, other):
        if not isinstance(other, ContentLength):
            return NotImplemented
        return ContentLength(self._bytes + other._bytes)

    __radd__ = __add__

    def __eq__(self, other):
        if not isinstance(other, ContentLength):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, ContentLength):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __repr__(self):
        return f"ContentLength({self._bytes})"

    def __str__(self):
        # Tiers switch on strictly greater than, so exactly 1024 bytes is "1024 B"
        if self._bytes > GIGS:
            return f"{self._bytes / GIGS:.2f} GB"
        elif self._bytes > MEGS:
            return f"{self._bytes / MEGS:.2f} MB"
        elif self._bytes > KILO:
            return f"{self._bytes / KILO:.2f} KB"
        return f"{self._bytes} B"
