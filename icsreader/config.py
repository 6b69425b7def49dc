from yaml import load, Loader
from .constants import *

DEFAULTS = {
    'log_level': 'INFO',
    'trim_crlf': True,
    'encoding': DEFAULT_ENCODING,
    'user_agent': USER_AGENT,
    'timeout': DEFAULT_TIMEOUT,
    'retries': DEFAULT_RETRIES,
    'retry_delay': DEFAULT_RETRY_DELAY,
}


def load_config(path=None):
    config = {**DEFAULTS, 'calendars': []}
    if path is not None:
        with open(path, 'r') as f:
            # an empty file loads as None
            config.update(load(f, Loader=Loader) or {})
    return config
