import requests
from .constants import *
from .types import *
from .errors import *
from .config import load_config
from .parsers.line import LineReader
from .parsers.vcalendar import CalendarParser, decode, decode_date, normalize_key, unescape_text
import io, logging, time
from . import parsers


def loads(text: str, trim_crlf: bool = True, encoding: str = DEFAULT_ENCODING) -> Calendar:
    return decode(io.BytesIO(text.encode(encoding)), trim_crlf, encoding)


def load(path, trim_crlf: bool = True, encoding: str = DEFAULT_ENCODING) -> Calendar:
    with open(path, 'rb') as f:
        return decode(f, trim_crlf, encoding)


class CalendarClient:
    def __init__(self, **kwargs):
        self.trim_crlf = kwargs.get('trim_crlf', True)
        self.encoding = kwargs.get('encoding', DEFAULT_ENCODING)
        self.timeout = kwargs.get('timeout', DEFAULT_TIMEOUT)

        self.client = requests.Session()
        self.client.headers.update({'User-Agent': kwargs.get('user_agent', USER_AGENT)})

    @classmethod
    def from_config(cls, config):
        return cls(
            trim_crlf=config['trim_crlf'],
            encoding=config['encoding'],
            timeout=config['timeout'],
            user_agent=config['user_agent'],
        )

    def get_calendar(self, url):
        r = self.client.get(url, timeout=self.timeout)
        if r.status_code != 200:
            raise FetchError(f"GET {url} returned {r.status_code}", r)
        return decode(io.BytesIO(r.content), self.trim_crlf, self.encoding)

    # network errors are retried, a calendar that fails to decode is not
    def refresh_calendar(self, url, retries: int = DEFAULT_RETRIES, delay: float = DEFAULT_RETRY_DELAY):
        retries = max(1, retries)
        for i in range(1, retries + 1):
            try:
                calendar = self.get_calendar(url)
                logging.info("calendar[{}] :: downloaded ({} events).".format(url, len(calendar)))
                return calendar
            except (requests.exceptions.ConnectionError, FetchError) as e:
                logging.error('calendar[{}] :: attempt {}/{} failed - {}'.format(url, i, retries, e))
                if i == retries:
                    raise
                time.sleep(delay * i)
