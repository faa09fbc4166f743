"""Shared fixtures for marketplace-adapters unit tests."""
from unittest.mock import MagicMock

import pytest

from marketplace_adapters.rakuten import RakutenProduct


@pytest.fixture
def rakuten_item():
    """Raw Rakuten item as returned by the Ichiba Item Search API."""
    return {
        "itemCode": "headphones-001",
        "itemName": "Premium Wireless Headphones",
        "itemCaption": "<p>Experience crystal-clear sound.</p><p>Features 40-hour battery life.</p>",
        "shopCode": "audiotech-rakuten",
        "shopName": "AudioTech Official Store",
        "genreId": "100051",
        "itemPrice": 29800,
        "taxFlag": 1,
        "postageFlag": 0,
        "reviewCount": 128,
        "reviewAverage": 4.5,
        "availability": 1,
        "mediumImageUrls": [
            "https://thumbnail.image.rakuten.co.jp/@0_mall/audiotech/cabinet/headphones/front.jpg",
            "https://thumbnail.image.rakuten.co.jp/@0_mall/audiotech/cabinet/headphones/side.jpg",
        ],
        "smallImageUrls": [
            "https://thumbnail.image.rakuten.co.jp/@0_mall/audiotech/cabinet/headphones/front_s.jpg",
        ],
        "itemUrl": "https://item.rakuten.co.jp/audiotech/headphones-001/",
        "shopUrl": "https://www.rakuten.co.jp/audiotech/",
    }


@pytest.fixture
def rakuten_product(rakuten_item):
    return RakutenProduct.model_validate(rakuten_item)


@pytest.fixture
def mock_logger():
    """Stand-in diagnostic sink so warnings can be asserted without capturing stdout."""
    return MagicMock()
