USER_AGENT = 'Mozilla/5.0 (X11; Linux x86_64) icsreader/1.0'
DEFAULT_TIMEOUT = 30
DEFAULT_RETRIES = 5
DEFAULT_RETRY_DELAY = 10
DEFAULT_ENCODING = 'utf-8'

# -- structure
BEGIN = "BEGIN"
END = "END"
VCALENDAR = "VCALENDAR"
VEVENT = "VEVENT"

# - properties
UID = "UID"
DTSTART = "DTSTART"
DTEND = "DTEND"
SUMMARY = "SUMMARY"
LOCATION = "LOCATION"
DESCRIPTION = "DESCRIPTION"

# keys carrying parameters (DTSTART;VALUE=DATE) are collapsed to these
PREFIXED_KEYS = (DTSTART, DTEND)

DATE_LAYOUT = "%Y%m%d"
DATE_LENGTH = 8
