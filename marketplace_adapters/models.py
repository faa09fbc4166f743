from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ProductPrice(BaseModel):
    amount: str  # decimal string, never a float
    currency: str


class ProductInput(BaseModel):
    """Marketplace-agnostic product record consumed by the catalog."""

    id: str
    title: str
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    price: ProductPrice
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the catalog, dropping absent fields like a JSON payload would."""
        data = self.model_dump(exclude_none=True)
        data["metadata"] = {
            key: value for key, value in self.metadata.items() if value is not None
        }
        return data
