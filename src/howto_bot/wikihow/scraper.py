"""Step extraction from wikiHow article HTML.

wikiHow renders the headline of each step as ``<b class="whb">`` inside the
step list. Only that markup is relied upon; everything else on the page is
ignored.
"""

from lxml import etree
from lxml import html as lxml_html

# Equivalent of the CSS selector ``b.whb``
STEP_XPATH = '//b[contains(concat(" ", normalize-space(@class), " "), " whb ")]'


class ScrapeError(Exception):
    """The page body could not be parsed as HTML."""


def scrape_steps(markup: bytes | str) -> list[str]:
    """Return the text of every step headline in document order.

    Fragments are whitespace-stripped and may be empty; callers decide what an
    empty fragment means. Raises ScrapeError for unparsable input.
    """
    try:
        document = lxml_html.fromstring(markup)
    except (etree.LxmlError, ValueError) as exc:
        raise ScrapeError(str(exc)) from exc

    return [element.text_content().strip() for element in document.xpath(STEP_XPATH)]
