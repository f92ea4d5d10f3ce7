# config.py
""" configuration container for Blotter """

import logging
import typing

from dateutil import tz

LOGGER = logging.getLogger(__name__)


class _Defaults:
    # pylint:disable=too-few-public-methods

    # Prepended verbatim to every entry slug
    link_prefix = ''

    # Entry dates carry no zone of their own
    timezone = tz.tzutc()

    # Markdown rendering
    markdown_extensions: typing.Tuple[str, ...] = (
        'tables',
        'fenced-code',
        'autolink',
        'strikethrough',
        'no-intra-emphasis',
    )
    smartquotes = False
    heading_anchors = True
    code_highlight = True


class Config(_Defaults):
    """ Stores configuration for a Blotter site """
    # pylint:disable=too-few-public-methods

    def __init__(self, from_dict: typing.Optional[typing.Dict[str, typing.Any]] = None):
        # Copy over the defaults
        for key, val in _Defaults.__dict__.items():
            if key[0] != '_':
                setattr(self, key, val)

        # Copy over the new configuration
        for key, val in (from_dict or {}).items():
            if hasattr(self, key) and key[0] != '_':
                setattr(self, key, val)
            else:
                LOGGER.warning("Unknown configuration key %s", key)
