"""
Rakuten Ichiba item structures.
Field names follow the Ichiba Item Search API; see
https://webservice.rakuten.co.jp/documentation/ichiba-item-search
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Characters the marketplace API trims from text fields: ASCII whitespace,
# line terminators, BOM and the Unicode space separators
BLANK_CHARACTERS = "".join(
    chr(c)
    for c in (
        [0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680]
        + list(range(0x2000, 0x200B))
        + [0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]
    )
)


class RakutenProduct(BaseModel):
    """Raw Rakuten item. Optional fields are None when the API omits them."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    item_code: str = Field(alias="itemCode")
    item_name: str = Field(alias="itemName")
    item_caption: Optional[str] = Field(None, alias="itemCaption")
    shop_code: Optional[str] = Field(None, alias="shopCode")
    shop_name: Optional[str] = Field(None, alias="shopName")
    genre_id: Optional[Union[str, int]] = Field(None, alias="genreId")
    item_price: Union[int, float] = Field(alias="itemPrice")
    tax_flag: Optional[int] = Field(None, alias="taxFlag")  # 0: tax excluded, 1: tax included
    postage_flag: Optional[int] = Field(None, alias="postageFlag")  # 0: shipping extra, 1: included
    credit_card_flag: Optional[int] = Field(None, alias="creditCardFlag")
    shop_of_the_year_flag: Optional[int] = Field(None, alias="shopOfTheYearFlag")
    ship_overseas_flag: Optional[int] = Field(None, alias="shipOverseasFlag")
    asuraku_flag: Optional[int] = Field(None, alias="asurakuFlag")  # same-day delivery
    point_rate: Optional[Union[int, float]] = Field(None, alias="pointRate")
    point_rate_start_time: Optional[str] = Field(None, alias="pointRateStartTime")
    point_rate_end_time: Optional[str] = Field(None, alias="pointRateEndTime")
    review_count: Optional[int] = Field(None, alias="reviewCount")
    review_average: Optional[Union[int, float]] = Field(None, alias="reviewAverage")
    availability: Optional[int] = None  # 0: unavailable, 1: available
    medium_image_urls: Optional[List[str]] = Field(None, alias="mediumImageUrls")
    small_image_urls: Optional[List[str]] = Field(None, alias="smallImageUrls")
    item_url: Optional[str] = Field(None, alias="itemUrl")
    shop_url: Optional[str] = Field(None, alias="shopUrl")
    tag_ids: Optional[List[int]] = Field(None, alias="tagIds")

    @field_validator("item_code", "item_name")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip(BLANK_CHARACTERS):
            raise ValueError("must not be blank")
        # Keep the original value; trimming is only used for the check
        return v

    @field_validator("item_price")
    @classmethod
    def validate_item_price(cls, v):
        if v < 0:
            raise ValueError("must be non-negative")
        return v


class RakutenPriceContext(BaseModel):
    """Caller-supplied price display overrides"""

    model_config = ConfigDict(populate_by_name=True)

    currency: Optional[str] = None
    include_tax: Optional[bool] = Field(None, alias="includeTax")
