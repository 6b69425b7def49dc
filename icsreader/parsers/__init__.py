from . import line, vcalendar
