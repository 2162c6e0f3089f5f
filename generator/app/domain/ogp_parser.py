"""OGP extraction from raw HTML using fixed patterns.

Only the exact form `<meta property="og:<field>" content="<value>"` is
recognised: attribute order, single quotes and extra whitespace are not
tolerated. Captured values are returned verbatim (no trimming, no entity
decoding).
"""
from __future__ import annotations

import re

from generator.app.constants import FALLBACK_TITLE
from generator.app.domain.models import OgpData


def _og_pattern(field: str) -> re.Pattern[str]:
    return re.compile(rf'<meta property="og:{field}" content="([^"]*)"')


OG_TITLE_RE = _og_pattern("title")
OG_DESCRIPTION_RE = _og_pattern("description")
OG_IMAGE_RE = _og_pattern("image")
OG_SITE_NAME_RE = _og_pattern("site_name")
TITLE_TAG_RE = re.compile(r"<title>([^<]*)</title>")


def _first(pattern: re.Pattern[str], html: str) -> str | None:
    match = pattern.search(html)
    if match is None:
        return None
    return match.group(1) or None


def parse_ogp(html: str, url: str) -> OgpData:
    """Build OgpData from a page body; title falls back to <title>, then FALLBACK_TITLE."""
    title = _first(OG_TITLE_RE, html) or _first(TITLE_TAG_RE, html) or FALLBACK_TITLE
    return OgpData(
        url=url,
        title=title,
        description=_first(OG_DESCRIPTION_RE, html),
        image=_first(OG_IMAGE_RE, html),
        site_name=_first(OG_SITE_NAME_RE, html),
    )
