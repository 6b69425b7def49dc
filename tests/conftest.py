"""
Pytest configuration and sample calendars.
"""
import io
import os
import sys
import pytest

# Ensure icsreader is importable without installing it
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


MINIMAL = b"""BEGIN:VCALENDAR
BEGIN:VEVENT
UID:1@test
DTSTART:20230101
DTEND:20230102
SUMMARY:Test
END:VEVENT
END:VCALENDAR
"""

SCHOOL = (
    b"BEGIN:VCALENDAR\r\n"
    b"VERSION:2.0\r\n"
    b"PRODID:-//school//planning//FR\r\n"
    b"BEGIN:VEVENT\r\n"
    b"UID:course-2@school\r\n"
    b"DTSTART:20231012T080000Z\r\n"
    b"DTEND:20231012T100000Z\r\n"
    b"SUMMARY:Algorithmique\\, TD\r\n"
    b"LOCATION:Salle L012\r\n"
    b"DESCRIPTION:Groupe A\\nApporter un ordinateur&nbspportable\r\n"
    b"END:VEVENT\r\n"
    b"BEGIN:VEVENT\r\n"
    b"UID:course-1@school\r\n"
    b"DTSTART;VALUE=DATE:20231009\r\n"
    b"DTEND;VALUE=DATE:20231010\r\n"
    b"SUMMARY:Rentr\xc3\xa9e\r\n"
    b"DESCRIPTION:Accueil des \xc3\xa9tudiants dans l'amphi\r\n"
    b"  principal\r\n"
    b"BEGIN:VALARM\r\n"
    b"ACTION:DISPLAY\r\n"
    b"END:VALARM\r\n"
    b"END:VEVENT\r\n"
    b"END:VCALENDAR\r\n"
)


@pytest.fixture
def minimal_ics():
    return io.BytesIO(MINIMAL)


@pytest.fixture
def school_ics():
    return io.BytesIO(SCHOOL)


@pytest.fixture
def school_bytes():
    return SCHOOL
