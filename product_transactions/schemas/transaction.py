from datetime import datetime
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    price: float
    category: str
    image: Optional[str] = None
    sold: bool
    # ORM rows expose date_of_sale, JSON uses dateOfSale
    date_of_sale: datetime = Field(
        ...,
        validation_alias=AliasChoices("date_of_sale", "dateOfSale"),
        serialization_alias="dateOfSale",
    )


class TransactionListResponse(BaseModel):
    transactions: List[TransactionOut]
    total: int


class StatisticsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(0.0, alias="totalSaleAmount")
    total_sold_items: int = Field(0, alias="totalSoldItems")
    total_not_sold_items: int = Field(0, alias="totalNotSoldItems")


class CombinedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    statistics: StatisticsResponse
    bar_chart: Dict[str, int] = Field(..., alias="barChart")
    pie_chart: Dict[str, int] = Field(..., alias="pieChart")


class InitializeResponse(BaseModel):
    message: str
    count: int
