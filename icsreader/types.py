from datetime import datetime

class DataClass:
    def __init__(self, **kwargs):
        for i in kwargs:
            setattr(self, i, kwargs[i])

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join([f'{k} = {v.__repr__()}' for k,v in self.__dict__.items()])})"

    def json(c):
        if isinstance(c, DataClass):
            return DataClass.json(c.__dict__)
        elif isinstance(c, list):
            return [DataClass.json(_) for _ in c]
        elif isinstance(c, dict):
            return {k: DataClass.json(v) for k,v in c.items()}
        elif isinstance(c, datetime):
            return c.isoformat()
        else:
            return c


class Event(DataClass):
    uid: str
    start: datetime # None while unset
    end: datetime # None while unset
    summary: str
    location: str
    description: str

    def __init__(self, **kwargs):
        super().__init__(**{
            'uid': '',
            'start': None,
            'end': None,
            'summary': '',
            'location': '',
            'description': '',
            **kwargs
        })

    def __str__(self):
        return "\n".join([
            "UID:" + self.uid,
            "Start: " + _render_time(self.start),
            "End: " + _render_time(self.end),
            "Summary: " + self.summary,
            "Location: " + self.location,
            "Description: " + self.description,
        ])


class Calendar(DataClass):
    events: list

    def __init__(self, **kwargs):
        super().__init__(**{'events': [], **kwargs})

    def __iter__(self):
        return iter(self.events)

    def __len__(self):
        return len(self.events)

    def sort(self):
        # unset starts go first, ties keep their insertion order
        self.events.sort(key=lambda e: (e.start is not None, e.start or datetime.min))


def _render_time(t):
    return '' if t is None else t.strftime('%Y-%m-%d %H:%M:%S')
