""" Exceptions raised while loading entries and comments """


class BlotterError(Exception):
    """ Base class for all entry-loading failures """


class ReadError(BlotterError):
    """ The header block or the body of a file could not be read """

    def __init__(self, path: str, reason: str = ''):
        super().__init__(f"Unable to read {path}" + (f": {reason}" if reason else ''))
        self.path = path


class DateParseError(BlotterError, ValueError):
    """ A date header didn't match ``DD/MM/YYYY HH:MM`` """

    def __init__(self, value: str, path: str):
        super().__init__(f"Malformed date '{value}' in file {path}")
        self.value = value
        self.path = path


class UnrecognizedFormatError(BlotterError, ValueError):
    """ The format header named something other than markdown """

    def __init__(self, value: str, path: str):
        super().__init__(f"Unknown entry-format {value} in file {path}")
        self.value = value
        self.path = path


class UnknownHeaderError(BlotterError, ValueError):
    """ A header key outside of the allowed set """

    def __init__(self, key: str, path: str):
        super().__init__(f"Unknown header-key {key} in file {path}")
        self.key = key
        self.path = path


class CommentParseError(BlotterError):
    """ A matching comment file couldn't be parsed """

    def __init__(self, path: str, reason: str = ''):
        super().__init__(f"Unable to parse comment {path}" + (f": {reason}" if reason else ''))
        self.path = path
