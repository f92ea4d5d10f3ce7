# markdown.py
""" markdown formatting functionality """

import html
import logging
import re
import typing

import misaka
import pygments
import pygments.formatters
import pygments.lexers
import pygments.util
import slugify

from . import utils
from .config import Config

LOGGER = logging.getLogger(__name__)

_HeadingKey = slugify.Slugify(to_lower=True, max_length=32)  # type:ignore


class HtmlRenderer(misaka.HtmlRenderer):
    """ Customized renderer for GitHub-style Markdown output

    :param Config cfg: the site configuration; see ``heading_anchors`` and
        ``code_highlight``
    """

    def __init__(self, cfg: Config):
        super().__init__()
        self._config = cfg
        self._heading_ids: typing.Dict[str, int] = {}

    def _header_id(self, content: str) -> str:
        """ Return a reasonable anchor ID for a heading; repeated headings
        get a numeric suffix """
        hid = _HeadingKey(re.sub(r'<[^>]*>', '', content)) or 'section'
        count = self._heading_ids.get(hid, 0)
        self._heading_ids[hid] = count + 1
        if count:
            hid = f'{hid}-{count}'
        return hid

    def header(self, content, level):
        """ Make a header with anchor. """
        htag = f'h{level}'

        if not self._config.heading_anchors:
            return f'<{htag}>{content}</{htag}>\n'

        hid = self._header_id(content)
        LOGGER.debug("heading %d: %s -> %s", level, content, hid)

        return '{htag_open}{content}</{htag}>\n'.format(
            htag_open=utils.make_tag(htag, {'id': hid}),
            content=content,
            htag=htag)

    def blockcode(self, text, lang):
        """ Code block with optional syntax highlighting """

        if not lang or not self._config.code_highlight:
            return '{pre}<code>{text}</code></pre>\n'.format(
                pre=utils.make_tag('pre', {'lang': lang or False}),
                text=html.escape(text))

        try:
            lexer = pygments.lexers.get_lexer_by_name(lang, stripall=True)
        except pygments.util.ClassNotFound:
            LOGGER.debug("No lexer for language %s", lang)
            lexer = pygments.lexers.TextLexer()  # pylint:disable=no-member

        formatter = pygments.formatters.HtmlFormatter(  # pylint:disable=no-member
            cssclass='highlight highlight-' + lang)
        return pygments.highlight(text, lexer, formatter)


def to_html(text: str, cfg: typing.Optional[Config] = None) -> str:
    """ Convert Markdown text to HTML.

    :param str text: the raw Markdown
    :param Config cfg: the configuration to render with; defaults apply if None
    """
    cfg = cfg or Config()

    renderer = HtmlRenderer(cfg)
    processor = misaka.Markdown(renderer, extensions=cfg.markdown_extensions)
    text = processor(text)

    if cfg.smartquotes:
        text = misaka.smartypants(text)

    return text
