""" test framework stuff """

import logging

logging.basicConfig(level=logging.DEBUG)
logging.getLogger().setLevel(logging.DEBUG)


class FakeReader:
    """ A header-file reader that serves canned content instead of a file """
    # pylint:disable=too-few-public-methods

    def __init__(self, headers, body='', error=None):
        self._headers = headers
        self._body = body
        self._error = error

    def __call__(self, path):
        self.path = path  # pylint:disable=attribute-defined-outside-init
        return self

    def headers(self):
        """ the canned headers """
        if self._error:
            raise self._error
        return self._headers

    def body(self):
        """ the canned body """
        return self._body


def write_file(directory, name, text):
    """ Write out a content file and return its path as a string """
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return str(path)
