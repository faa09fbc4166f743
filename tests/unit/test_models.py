import pytest

from marketplace_adapters.models import ProductInput, ProductPrice

pytestmark = pytest.mark.unit


def test_product_input_defaults():
    product = ProductInput(id="p-1", title="Lamp", price=ProductPrice(amount="10", currency="JPY"))

    assert product.images == []
    assert product.metadata == {}
    assert product.description is None


def test_to_dict_drops_absent_fields():
    product = ProductInput(
        id="p-1",
        title="Lamp",
        images=["https://example.com/lamp.jpg"],
        price=ProductPrice(amount="10", currency="JPY"),
        metadata={"source": "rakuten", "shopCode": None, "taxIncluded": False, "reviewCount": 0},
    )

    assert product.to_dict() == {
        "id": "p-1",
        "title": "Lamp",
        "images": ["https://example.com/lamp.jpg"],
        "price": {"amount": "10", "currency": "JPY"},
        "metadata": {"source": "rakuten", "taxIncluded": False, "reviewCount": 0},
    }


def test_to_dict_keeps_empty_description_and_images():
    product = ProductInput(
        id="p-1",
        title="Lamp",
        description="",
        price=ProductPrice(amount="10", currency="JPY"),
    )
    data = product.to_dict()

    assert data["description"] == ""
    assert data["images"] == []
