"""Size-capped capture buffer for one output stream of a child process."""

MAX_OUTPUT_BYTES = 1024 * 1024


def _format_limit(limit: int) -> str:
    if limit >= 1024 * 1024 and limit % (1024 * 1024) == 0:
        return f"{limit // (1024 * 1024)}MB"
    if limit >= 1024 and limit % 1024 == 0:
        return f"{limit // 1024}KB"
    return f"{limit} byte"


class BoundedOutputBuffer:
    """Accumulates bytes up to a ceiling, then appends a marker once.

    Data arriving after the ceiling is reached is dropped. The stored size
    never exceeds ``limit + len(marker)``.
    """

    def __init__(self, stream_name: str, limit: int = MAX_OUTPUT_BYTES) -> None:
        """Initialize an empty buffer for the named stream."""
        self.stream_name = stream_name
        self.limit = limit
        self.truncated = False
        self._chunks: list[bytes] = []
        self._size = 0
        self._closed = False

    @property
    def marker(self) -> bytes:
        """The in-band notice written when the ceiling is hit."""
        notice = (
            f"\n... [{self.stream_name} truncated - "
            f"exceeded {_format_limit(self.limit)} limit]"
        )
        return notice.encode("utf-8")

    def append(self, data: bytes) -> None:
        """Add a chunk, cutting it at the ceiling if necessary."""
        if self._closed or self.truncated or not data:
            return
        remaining = self.limit - self._size
        if len(data) <= remaining:
            self._chunks.append(data)
            self._size += len(data)
            return
        if remaining > 0:
            self._chunks.append(data[:remaining])
            self._size += remaining
        self._chunks.append(self.marker)
        self.truncated = True

    def close(self) -> None:
        """Stop accepting data; later appends are dropped silently."""
        self._closed = True

    def getvalue(self) -> bytes:
        """Return the captured bytes, including the marker if present."""
        return b"".join(self._chunks)

    def text(self) -> str:
        """Return the captured output decoded as UTF-8."""
        return self.getvalue().decode("utf-8", errors="replace")
