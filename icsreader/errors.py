class ICSError(Exception): pass

class StreamError(ICSError): pass

class MalformedLineError(ICSError):
    def __init__(self, line):
        super().__init__(f"bad line, couldn't find key:value in {line!r}")
        self.line = line

class StructureError(ICSError): pass

class DateParseError(ICSError):
    def __init__(self, value):
        super().__init__(f"invalid date value {value!r}")
        self.value = value

class FetchError(ICSError):
    def __init__(self, s, response=None):
        super().__init__(s)
        self.response = response
