import re
from typing import Optional

# Checked in order; the first pattern that matches wins, e.g.
#   https://www.amazon.com/dp/B0DCPKM21Y
#   https://www.amazon.co.jp/gp/product/B0DCPKM21Y
#   https://www.amazon.com/Product-Name/dp/B0DCPKM21Y/ref=sr_1_1
ASIN_URL_PATTERNS = (
    re.compile(r"/dp/([A-Z0-9]{10})", re.IGNORECASE | re.ASCII),
    re.compile(r"/gp/product/([A-Z0-9]{10})", re.IGNORECASE | re.ASCII),
    re.compile(r"/product/([A-Z0-9]{10})", re.IGNORECASE | re.ASCII),
)


def extract_asin_from_url(url: str) -> Optional[str]:
    """Extract the upper-cased ASIN from an Amazon product URL, or None."""
    if not url or not isinstance(url, str):
        return None

    for pattern in ASIN_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1).upper()

    return None
