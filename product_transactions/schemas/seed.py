from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SeedRecord(BaseModel):
    """One item of the upstream product_transaction.json array."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    title: str
    description: str = ""
    price: float
    category: str
    image: Optional[str] = None
    sold: bool = False
    date_of_sale: datetime = Field(..., alias="dateOfSale")

    @field_validator("date_of_sale")
    @classmethod
    def _to_naive_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def to_row(self) -> dict:
        return self.model_dump(by_alias=False)
