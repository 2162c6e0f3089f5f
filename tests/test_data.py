"""
Shared HTML fixtures and URLs for fetcher, renderer and API tests.

Pages cover the OGP tag layouts the extractor accepts and the ones it
deliberately ignores.
"""

FULL_OGP_PAGE = """<!doctype html>
<html>
<head>
<title>Page Title</title>
<meta property="og:title" content="Example &amp; Friends" />
<meta property="og:description" content="  A description with spaces  " />
<meta property="og:image" content="https://example.com/card.png" />
<meta property="og:site_name" content="Example Site" />
</head>
<body>Hello</body>
</html>
"""

TITLE_ONLY_PAGE = """<html><head><title>Only A Title</title><title>Second</title></head></html>"""

NO_TITLE_PAGE = """<html><head><meta name="description" content="nothing useful"></head></html>"""

# Attribute order swapped and single quotes: the fixed patterns do not match these.
UNSUPPORTED_LAYOUT_PAGE = """<html><head>
<meta content="Reordered" property="og:title">
<meta property='og:site_name' content='Single Quoted'>
<title>Fallback Title</title>
</head></html>"""

EMPTY_OG_TITLE_PAGE = """<html><head>
<meta property="og:title" content="" />
<title>From Title Tag</title>
</head></html>"""

# ---- Real-world pages used by the network integration tests ----
TEST_URLS_WITH_OGP = [
    "https://github.com/",
    "https://www.python.org/",
]

TEST_URLS_UNREACHABLE = [
    "http://localhost:9/",
    "https://nonexistent.invalid/",
]
