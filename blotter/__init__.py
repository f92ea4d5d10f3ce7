""" Blotter: turns flat-file blog entries into structured posts.

Each entry is a header block and a body; see :py:func:`blotter.entry.parse_entry`. """

import logging

from .__version__ import __version__
from .comment import Comment
from .config import Config
from .entry import Entry, HeaderKey, Site, parse_entry
from .errors import (BlotterError, CommentParseError, DateParseError,
                     ReadError, UnknownHeaderError, UnrecognizedFormatError)

LOGGER = logging.getLogger(__name__)

__all__ = [
    '__version__',
    'BlotterError', 'Comment', 'CommentParseError', 'Config', 'DateParseError',
    'Entry', 'HeaderKey', 'ReadError', 'Site', 'UnknownHeaderError',
    'UnrecognizedFormatError', 'parse_entry',
]
