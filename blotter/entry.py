# entry.py
""" Functions for handling content items """

import logging
import typing
from enum import Enum

import arrow

from . import comment, headers, markdown, utils
from .config import Config
from .errors import (BlotterError, CommentParseError, DateParseError,
                     ReadError, UnknownHeaderError, UnrecognizedFormatError)

LOGGER = logging.getLogger(__name__)


class HeaderKey(Enum):
    """ The header keys an entry may carry """
    DATE = 'date'
    TITLE = 'title'
    SUBJECT = 'subject'     # Synonym for TITLE
    FORMAT = 'format'
    TAGS = 'tags'


#: The only legal value of the format header
MARKDOWN_FORMAT = 'markdown'


class Entry(typing.NamedTuple):
    """ A single parsed post.

    ``month_name``, ``month`` and ``year`` are derived from ``date`` and exist
    to simplify the construction of archive pages.
    """
    title: str
    path: str
    tags: typing.Tuple[str, ...]
    content: str
    link: str
    date: typing.Optional[arrow.Arrow]
    comments: typing.Tuple[comment.Comment, ...]
    month_name: str
    month: str
    year: str

    @property
    def slug(self) -> str:
        """ The link name of this entry, without the site prefix """
        return utils.make_slug(self.title)

    @property
    def archive_key(self) -> str:
        """ Get the entry date's month, useful for grouping """
        return self.date.format(utils.MONTH_FORMAT) if self.date else ''

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        """ Return a JSON-friendly version of this entry """
        return {
            'title': self.title,
            'path': self.path,
            'tags': list(self.tags),
            'content': self.content,
            'link': self.link,
            'date': self.date.isoformat() if self.date else None,
            'comments': [item.to_dict() for item in self.comments],
            'month_name': self.month_name,
            'month': self.month,
            'year': self.year,
        }


class Site:
    """ The site-wide context that entries are parsed against

    :param str prefix: prepended verbatim to each entry's link; defaults to the
        configured ``link_prefix``
    :param list comment_files: every candidate comment file on the site
    :param cfg: a Config, or a dict of configuration overrides

    The keyword arguments ``read_headers``, ``render_markdown`` and
    ``parse_comment`` replace the file reader, the Markdown renderer and the
    comment loader respectively.
    """
    # pylint:disable=too-few-public-methods,too-many-arguments

    def __init__(self,
                 prefix: typing.Optional[str] = None,
                 comment_files: typing.Optional[utils.ListLike[str]] = None,
                 cfg: typing.Union[Config, typing.Dict[str, typing.Any], None] = None,
                 read_headers: typing.Optional[typing.Callable] = None,
                 render_markdown: typing.Optional[typing.Callable[[str, Config], str]] = None,
                 parse_comment: typing.Optional[typing.Callable[[str], typing.Any]] = None):
        self.config = cfg if isinstance(cfg, Config) else Config(cfg)
        self.prefix = prefix if prefix is not None else self.config.link_prefix
        self.comment_files = tuple(utils.as_list(comment_files))

        self.read_headers = read_headers or headers.HeaderFile
        self.render_markdown = render_markdown or markdown.to_html
        self.parse_comment = parse_comment or self._parse_comment

    def _parse_comment(self, path: str) -> comment.Comment:
        return comment.parse(path, self.config)


def _header_items(found) -> typing.Iterable[typing.Tuple[str, str]]:
    """ Accept either a mapping or a sequence of pairs from a header reader """
    if hasattr(found, 'items'):
        return found.items()
    return found


def parse_entry(path: str, site: Site) -> Entry:
    """ Create an entry from the contents of the given file.

    If the file is formatted in Markdown it will be expanded to HTML as part of
    the creation process. Any failure raises a BlotterError subclass; no partial
    entry is ever returned.
    """
    # pylint:disable=too-many-locals,too-many-branches

    try:
        reader = site.read_headers(path)
        found = reader.headers()
        body = reader.body()
    except ReadError:
        raise
    except Exception as err:  # pylint:disable=broad-except
        raise ReadError(path, str(err)) from err

    title = ''
    tags: typing.List[str] = []
    date: typing.Optional[arrow.Arrow] = None
    month_name = month = year = ''

    # Entries might have `format: markdown`; otherwise they're treated as HTML
    is_markdown = False

    for key, val in _header_items(found):
        try:
            header = HeaderKey(key.lower())
        except ValueError as err:
            raise UnknownHeaderError(key, path) from err

        LOGGER.debug("%s: %s=%s", path, header.name, val)

        if header == HeaderKey.DATE:
            try:
                date = utils.parse_date(val, site.config.timezone)
            except ValueError as err:
                raise DateParseError(val, path) from err
            month_name = date.format('MMMM')
            month = date.format('MM')
            year = date.format(utils.YEAR_FORMAT)
        elif header in (HeaderKey.TITLE, HeaderKey.SUBJECT):
            title = val
        elif header == HeaderKey.FORMAT:
            if val != MARKDOWN_FORMAT:
                raise UnrecognizedFormatError(val, path)
            is_markdown = True
        elif header == HeaderKey.TAGS:
            tags += utils.split_tags(val)
            tags.sort()

    if is_markdown:
        body = site.render_markdown(body, site.config)

    slug = utils.make_slug(title)

    comments = []
    for comment_path in site.comment_files:
        # Comment files are named after the entry they belong to
        if slug in comment_path:
            LOGGER.debug("%s: attaching comment %s", path, comment_path)
            try:
                comments.append(site.parse_comment(comment_path))
            except BlotterError:
                raise
            except Exception as err:  # pylint:disable=broad-except
                raise CommentParseError(comment_path, str(err)) from err

    return Entry(title=title,
                 path=path,
                 tags=tuple(tags),
                 content=body,
                 link=site.prefix + slug,
                 date=date,
                 comments=tuple(comments),
                 month_name=month_name,
                 month=month,
                 year=year)
