# utils.py
""" Some useful utilities that don't belong anywhere else """

import html
import logging
import re
import typing

import arrow

LOGGER = logging.getLogger(__name__)

T = typing.TypeVar('T')  # pylint:disable=invalid-name
ListLike = typing.Union[typing.List[T],
                        typing.Tuple[T, ...],
                        typing.Set[T]]
TagAttr = typing.Union[str, bool, None]
TagAttrs = typing.Dict[str, TagAttr]

#: arrow format string for entry and comment date headers
DATE_FORMAT = 'DD/MM/YYYY HH:mm'

#: arrow format string for 'month' archives
MONTH_FORMAT = 'YYYY-MM'

#: arrow format string for 'year' archives
YEAR_FORMAT = 'YYYY'

# arrow will happily match a prefix; we want the whole value
_DATE_SHAPE = re.compile(r'[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{2}:[0-9]{2}')

_LINK_UNSAFE = re.compile(r'[^a-zA-Z0-9]')


def parse_date(datestr: str, tzinfo) -> arrow.Arrow:
    """ Parse a header date of the form ``DD/MM/YYYY HH:MM`` (24-hour clock)

    :param str datestr: the date text
    :param tzinfo: the timezone to interpret the date in

    :raises ValueError: if the text isn't a valid date in that format
    """
    if not _DATE_SHAPE.fullmatch(datestr):
        raise ValueError(f"'{datestr}' does not match {DATE_FORMAT}")

    return arrow.get(datestr, DATE_FORMAT, tzinfo=tzinfo)


def make_slug(title: str) -> str:
    """ Turn a title into a filesystem- and URL-safe link name.

    Every character other than an ASCII letter or digit becomes its own
    underscore; runs are not collapsed. ``Hello, World!`` becomes
    ``hello__world_.html``.
    """
    return (_LINK_UNSAFE.sub('_', title) + '.html').lower()


def split_tags(value: str) -> typing.List[str]:
    """ Split a comma-separated tag header into trimmed, lowercased tags,
    dropping the empty ones """
    tags = []
    for tag in value.split(','):
        tag = tag.strip().lower()
        if tag:
            tags.append(tag)
    return tags


def make_tag(name: str,
             attrs: TagAttrs,
             start_end: bool = False) -> str:
    """ Build an HTML tag from the given name and attributes.

    :param str name: the name of the tag (p, div, etc.)
    :param attrs: a dict or list of attributes to apply to the tag
    :param bool start_end: whether this tag should be self-closing

    If an attribute's value is None it will be written as a standalone attribute,
    e.g. ``<audio controls>``. To suppress it entirely, make the value explicitly False.
    """

    text = '<' + name

    if isinstance(attrs, dict):
        attr_list = attrs.items()
    elif isinstance(attrs, list):
        attr_list = attrs
    elif attrs is not None:
        raise TypeError("Unhandled attrs type " + str(type(attrs)))
    else:
        attr_list = []

    for key, val in attr_list:
        if val is not False:
            text += f' {key}'
            if val is not None:
                escaped = html.escape(str(val), False).replace('"', '&#34;')
                text += f'="{escaped}"'
    if start_end:
        text += ' /' if attrs else '/'
    text += '>'
    return text


def is_list(item: typing.Any) -> bool:
    """ Return if this is a list-type thing """
    return bool(getattr(item, '__iter__', None)) and not isinstance(item, str)


def as_list(item: typing.Any) -> ListLike:
    """ Return list-type things directly; convert other things into a tuple """
    if item is None:
        return ()

    if is_list(item):
        return item

    return (item,)
