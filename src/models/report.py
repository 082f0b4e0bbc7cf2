"""Report models produced by representatives and the coordinator."""

from typing import Dict, List

from pydantic import BaseModel, Field


class InteractionTimeEntry(BaseModel):
    """Interaction minutes for one customer in a representative's portfolio."""

    customer_id: int
    customer_name: str
    customer_type: str
    total_minutes: int


class InteractionTimeReport(BaseModel):
    """Per-representative interaction-time report, in assignment order."""

    rep_id: int
    rep_name: str
    entries: List[InteractionTimeEntry] = Field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return sum(e.total_minutes for e in self.entries)


class SystemReport(BaseModel):
    """System-wide counts and aggregate interaction time."""

    total_customers: int
    customers_by_type: Dict[str, int] = Field(default_factory=dict)
    total_representatives: int
    total_interaction_minutes: int
