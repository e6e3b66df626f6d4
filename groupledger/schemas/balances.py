from pydantic import BaseModel, Field

class SettlementOut(BaseModel):
    from_member: str = Field(alias="from")
    to_member: str = Field(alias="to")
    amount: float

    class Config:
        populate_by_name = True
