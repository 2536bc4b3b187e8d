"""Parser for the page-tagged story format.

Expected provider output:

    TITLE: The Brave Fox
    PAGE 1: ...
    ...
    PAGE 6: ...

Provider text is untrusted. Anything that does not match degrades to a
single-page story instead of failing.
"""

import logging
import re

from kidstory_ai.models import ParsedStory

logger = logging.getLogger(__name__)

TITLE_TAG = "TITLE:"
PAGE_LINE = re.compile(r"^PAGE\s*(\d+)\s*:\s*(.*)$")
FALLBACK_TITLE = "A Magical Story"
FALLBACK_PAGE = "Once upon a time, a wonderful adventure was about to begin."
_TITLE_PUNCTUATION = re.compile(r"[*#\[\]]")


def _clean_title(line: str) -> str:
    title = _TITLE_PUNCTUATION.sub("", line).strip()
    if title.upper().startswith(TITLE_TAG):
        title = title[len(TITLE_TAG):].strip()
    return title


def _parse_tagged(lines: list[str]) -> tuple[str, list[str]]:
    title = ""
    pages: list[str] = []
    for line in lines:
        if line.startswith(TITLE_TAG):
            # Duplicate TITLE lines: last one wins.
            title = line[len(TITLE_TAG):].strip()
            continue
        match = PAGE_LINE.match(line)
        if match and match.group(2).strip():
            # Kept in textual order, not re-sorted by the page number.
            pages.append(match.group(2).strip())
    return title, pages


def _parse_fallback(lines: list[str]) -> tuple[str, list[str]]:
    if not lines:
        return FALLBACK_TITLE, [FALLBACK_PAGE]
    title = _clean_title(lines[0]) or FALLBACK_TITLE
    rest = []
    for line in lines[1:]:
        match = PAGE_LINE.match(line)
        rest.append(match.group(2).strip() if match else line)
    body = "\n".join(part for part in rest if part).strip()
    return title, [body or title]


def parse_pages(raw: str) -> ParsedStory:
    """
    Parse provider text into a title and ordered pages.
    Total: malformed input yields a single-page story flagged as degraded.
    """
    lines = [line.strip() for line in (raw or "").splitlines()]
    lines = [line for line in lines if line]

    title, pages = _parse_tagged(lines)
    degraded = False
    if not title or not pages:
        logger.warning(
            "Story text not in tagged format (title=%s, pages=%d); using single-page fallback. Raw: %s",
            bool(title),
            len(pages),
            (raw or "")[:200],
        )
        title, pages = _parse_fallback(lines)
        degraded = True

    assert title and pages, "page parser must return a title and at least one page"
    return ParsedStory(title=title, pages=pages, degraded=degraded)
