# comment.py
""" Reader comments attached to an entry """

import logging
import typing

import arrow

from . import headers, utils
from .config import Config
from .errors import BlotterError, CommentParseError

LOGGER = logging.getLogger(__name__)


class Comment(typing.NamedTuple):
    """ A reader comment. Beyond its headers and text, the comment is opaque """
    path: str
    headers: typing.Tuple[typing.Tuple[str, str], ...]
    body: str
    date: typing.Optional[arrow.Arrow] = None

    def get(self, key: str, default: typing.Optional[str] = None) -> typing.Optional[str]:
        """ Get the last value of a header, or the default """
        key = key.lower()
        found = default
        for name, val in self.headers:
            if name == key:
                found = val
        return found

    @property
    def author(self) -> str:
        """ The name given in the comment's ``name`` or ``author`` header """
        return self.get('author') or self.get('name') or ''

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        """ Return a JSON-friendly version of this comment """
        return {
            'path': self.path,
            'author': self.author,
            'date': self.date.isoformat() if self.date else None,
            'headers': [list(pair) for pair in self.headers],
            'body': self.body,
        }


def parse(path: str, cfg: typing.Optional[Config] = None) -> Comment:
    """ Load a comment file.

    :raises CommentParseError: if the file can't be read or has a malformed date
    """
    reader = headers.HeaderFile(path)
    try:
        result = Comment(path, tuple(reader.headers()), reader.body())
    except BlotterError as err:
        raise CommentParseError(path, str(err)) from err

    value = result.get('date')
    if value is not None:
        try:
            result = result._replace(
                date=utils.parse_date(value, (cfg or Config()).timezone))
        except ValueError as err:
            raise CommentParseError(path, f"malformed date '{value}'") from err

    LOGGER.debug("loaded comment %s (%d headers)", path, len(result.headers))
    return result
