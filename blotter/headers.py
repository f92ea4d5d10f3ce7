# headers.py
""" Reading header-file formatted content

A header file is a block of ``Key: value`` lines, a blank line, and then the
body text; the same layout as an email message. """

import email
import email.errors
import email.message
import logging
import re
import typing

from .errors import ReadError

LOGGER = logging.getLogger(__name__)

HeaderList = typing.List[typing.Tuple[str, str]]


def load_message(filepath: str) -> email.message.Message:
    """ Load a message from the filesystem """
    with open(filepath, 'r', encoding='utf-8') as file:
        return email.message_from_file(file)


def _unfold(value: str) -> str:
    """ Join continuation lines of a folded header value """
    return re.sub(r'\r?\n[ \t]+', ' ', value).strip()


class HeaderFile:
    """ Lazily reads the headers and body of a header file.

    The file is loaded on first access and then kept, so that headers() and
    body() always describe the same version of the file.
    """

    def __init__(self, path: str):
        self.path = path
        self._message: typing.Optional[email.message.Message] = None

    def _load(self) -> email.message.Message:
        if self._message is None:
            try:
                message = load_message(self.path)
            except (OSError, UnicodeDecodeError) as err:
                raise ReadError(self.path, str(err)) from err

            for defect in message.defects:
                if isinstance(defect, email.errors.MissingHeaderBodySeparatorDefect):
                    # the parser gives up on the header block and calls the rest body
                    line = str(message.get_payload()).partition('\n')[0]
                    raise ReadError(self.path, f"malformed header line '{line}'")
                LOGGER.warning("%s: %s", self.path, defect.__class__.__name__)

            if message.is_multipart():
                raise ReadError(self.path, "multipart content is not supported")

            self._message = message
        return self._message

    def headers(self) -> HeaderList:
        """ Get the (key, value) header pairs, in file order; keys are
        lowercased and repeated keys are kept """
        return [(key.lower(), _unfold(val)) for key, val in self._load().items()]

    def body(self) -> str:
        """ Get the text following the header block """
        return self._load().get_payload()
