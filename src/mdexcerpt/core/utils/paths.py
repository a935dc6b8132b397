"""Public URL paths for blog posts"""

from datetime import date
from urllib.parse import quote


MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_URI_SAFE = "!~*'()"    # left unescaped, as by JS encodeURIComponent


def post_path(pub_date: date, slug: str) -> str:
    """Return '/{year}/{mon}/{dd}/{slug}' (e.g. '/2024/mar/05/hello-world')."""
    month = MONTHS[pub_date.month - 1]
    return f"/{pub_date.year}/{month}/{pub_date.day:02d}/{quote(slug, safe=_URI_SAFE)}"
