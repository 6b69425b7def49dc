import logging
from ..constants import DEFAULT_ENCODING
from ..errors import MalformedLineError, StreamError


class LineReader:
    """
    Iterates over the (key, value) pairs of an iCalendar byte stream.

    Folded lines (raw lines starting with a space) are unfolded: the leading
    space is dropped and the rest is glued to the logical line being built.
    Iteration stops at the end of the stream.

    Raw lines end with '\\n' or '\\r\\n'. trim_crlf=True strips spaces, '\\r' and
    '\\n' around keys and values, trim_crlf=False only strips spaces.
    """
    def __init__(self, stream, trim_crlf: bool = True, encoding: str = DEFAULT_ENCODING):
        self._stream = stream
        self._pending = None
        self.trim_crlf = trim_crlf
        self.encoding = encoding

    def __iter__(self):
        return self

    def __next__(self):
        line = self.read_line()
        if line is None:
            raise StopIteration
        return self.split(line)

    def read_line(self):
        """Returns the next logical line, or None once the stream is exhausted."""
        buf = bytearray()
        while True:
            raw = self._read_raw()
            if raw is None:
                if not buf:
                    return None
                break

            # blank lines are skipped
            if not raw:
                continue
            if raw[:1] == b' ':
                raw = raw[1:]
            buf += raw

            nxt = self._peek_raw()
            if nxt is None or nxt[:1] != b' ':
                break
        return buf.decode(self.encoding, errors='replace')

    def split(self, line: str):
        key, sep, value = line.partition(':')
        if not sep:
            logging.error('line_reader :: no key:value separator in {!r}.'.format(line))
            raise MalformedLineError(line)
        chars = ' \r\n' if self.trim_crlf else ' '
        return key.strip(chars), value.strip(chars)

    # returns the raw line without its terminator, None at end of stream
    def _read_raw(self):
        if self._pending is not None:
            raw, self._pending = self._pending, None
            return raw

        try:
            raw = self._stream.readline()
        except OSError as e:
            raise StreamError(str(e)) from e
        if not raw:
            return None
        if isinstance(raw, str):
            raw = raw.encode(self.encoding)

        if raw.endswith(b"\r\n"):
            raw = raw[:-2]
        elif raw.endswith(b"\n"):
            raw = raw[:-1]
        return raw

    def _peek_raw(self):
        if self._pending is None:
            self._pending = self._read_raw()
        return self._pending
