import logging
from datetime import datetime
from ..constants import *
from ..errors import DateParseError, StructureError
from ..types import Calendar, Event
from .line import LineReader


class CalendarParser:
    def __init__(self, stream, trim_crlf: bool = True, encoding: str = DEFAULT_ENCODING):
        self._lines = LineReader(stream, trim_crlf, encoding)
        self.calendar = None

    def parse(self):
        for key, value in self._lines:
            if key == BEGIN:
                if self.calendar is None:
                    if value != VCALENDAR:
                        raise StructureError("expected BEGIN:VCALENDAR")
                    self.calendar = Calendar()
                    logging.debug('calendar :: BEGIN:VCALENDAR found.')

                # other components (VTIMEZONE, VALARM...) are not parsed,
                # their properties are read like any other line
                if value == VEVENT:
                    self.calendar.events.append(self._parse_event())

            if key == END and value == VCALENDAR:
                break

        if self.calendar is None:
            raise StructureError("expected BEGIN:VCALENDAR")

        self.calendar.sort()
        logging.debug('calendar :: decoded {} events.'.format(len(self.calendar)))
        return self.calendar

    # fill an Event until its END:VEVENT (or the end of the stream)
    def _parse_event(self):
        event = Event()
        for key, value in self._lines:
            key = normalize_key(key)
            value = unescape_text(value)

            if key == END:
                if value == VEVENT:
                    logging.debug('calendar[{}] :: event decoded.'.format(event.uid))
                    return event
                # stray END:VALARM and friends
                continue

            if key in EVENT_FIELDS:
                attr, convert = EVENT_FIELDS[key]
                setattr(event, attr, convert(value))

        logging.debug('calendar[{}] :: stream ended inside an event.'.format(event.uid))
        return event


def decode(stream, trim_crlf: bool = True, encoding: str = DEFAULT_ENCODING) -> Calendar:
    return CalendarParser(stream, trim_crlf, encoding).parse()


def normalize_key(key: str) -> str:
    for prefix in PREFIXED_KEYS:
        if key.startswith(prefix):
            return prefix
    return key


def decode_date(value: str):
    """
    Reads the YYYYMMDD date at the start of value, any time part is dropped.
    Values shorter than a date give None (unset).
    """
    if len(value) < DATE_LENGTH:
        return None
    s = value[:DATE_LENGTH]
    if not (s.isascii() and s.isdigit()):
        raise DateParseError(value)
    try:
        return datetime.strptime(s, DATE_LAYOUT)
    except ValueError as e:
        raise DateParseError(value) from e


def unescape_text(s: str) -> str:
    # order matters: "\\n" must become a newline before newlines are flattened
    s = s.replace("\\;", ";")
    s = s.replace("\\,", ",")
    s = s.replace("\\n", "\n")
    s = s.replace("\\\\", "\\")
    s = s.replace("\n", " ")
    s = s.replace("&nbsp", " ")
    return s


EVENT_FIELDS = {
    UID: ('uid', str),
    DTSTART: ('start', decode_date),
    DTEND: ('end', decode_date),
    SUMMARY: ('summary', str),
    LOCATION: ('location', str),
    DESCRIPTION: ('description', str),
}
