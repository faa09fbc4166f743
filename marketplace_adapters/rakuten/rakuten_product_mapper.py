import math
import re
from typing import List, Optional, Union

from marketplace_adapters.models import ProductInput, ProductPrice
from .rakuten_data_models import RakutenPriceContext, RakutenProduct

SOURCE_NAME = "rakuten"
DEFAULT_CURRENCY = "JPY"

# Captions are shop-authored HTML; tags are pattern-stripped, not parsed
_HTML_TAG_RE = re.compile(r"<[^>]*>")


def _format_float(value: float) -> str:
    """Render a float the way the marketplace's JSON numbers print.

    Uses the shortest round-trip digits, plain notation for exponents in
    (-7, 21) and `1e+21` style outside it; 29800.0 -> "29800", 1e-05 -> "0.00001".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    mantissa, _, exponent = repr(abs(value)).partition("e")
    point = mantissa.find(".") if "." in mantissa else len(mantissa)
    digits = mantissa.replace(".", "")
    # value == 0.<digits> * 10 ** n
    n = point + int(exponent or 0)
    stripped = digits.lstrip("0")
    n -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        fraction = f".{digits[1:]}" if k > 1 else ""
        text = f"{digits[0]}{fraction}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def _format_price_amount(value: Union[int, float]) -> str:
    """Stringify the price verbatim: 29800 -> "29800", 29800.0 -> "29800", 9.5 -> "9.5"."""
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _select_images(product: RakutenProduct) -> List[str]:
    # Medium images are preferred; an empty medium list falls through to small ones
    if product.medium_image_urls:
        return list(product.medium_image_urls)
    if product.small_image_urls:
        return list(product.small_image_urls)
    return []


def _clean_caption(caption: Optional[str]) -> Optional[str]:
    if not caption:
        return None
    return _HTML_TAG_RE.sub("", caption).strip()


def convert_rakuten_product(
    product: RakutenProduct,
    price_context: Optional[RakutenPriceContext] = None,
) -> ProductInput:
    """Convert a Rakuten item into the catalog's ProductInput.

    The input is expected to have passed validate_rakuten_product already; no
    checks are repeated here and the input is never modified.
    """
    currency = (price_context.currency if price_context else None) or DEFAULT_CURRENCY
    tax_included = product.tax_flag == 1

    price = ProductPrice(
        amount=_format_price_amount(product.item_price),
        currency=currency,
    )

    fields = {
        "id": product.item_code,
        "title": product.item_name,
        "images": _select_images(product),
        "price": price,
        "metadata": {
            "source": SOURCE_NAME,
            "shopCode": product.shop_code,
            "shopName": product.shop_name,
            "genreId": product.genre_id,
            "taxIncluded": tax_included,
            "reviewCount": product.review_count,
            "reviewAverage": product.review_average,
            "itemUrl": product.item_url,
            "shopUrl": product.shop_url,
        },
    }
    description = _clean_caption(product.item_caption)
    if description is not None:
        fields["description"] = description

    return ProductInput(**fields)
