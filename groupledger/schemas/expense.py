from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional, Union

class ExpenseCreate(BaseModel):
    description: Optional[str] = None
    amount: Optional[Union[float, str]] = None
    paid_by: Optional[str] = Field(None, alias="paidBy")
    split_between: Optional[List[str]] = Field(None, alias="splitBetween")

    class Config:
        populate_by_name = True

class ExpenseOut(BaseModel):
    id: str
    description: str
    amount: float
    paid_by: str = Field(alias="paidBy")
    split_between: List[str] = Field(alias="splitBetween")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        populate_by_name = True
