"""Sales representative model."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class SalesRepresentative(BaseModel):
    """
    Agent holding a portfolio of customer ids.

    The portfolio keeps assignment order and duplicates; customers themselves
    live in the coordinator's registry and are resolved by id.
    """

    model_config = ConfigDict(frozen=True)

    rep_id: int = Field(ge=1)
    name: str

    _customer_ids: List[int] = PrivateAttr(default_factory=list)

    @property
    def customer_ids(self) -> Tuple[int, ...]:
        return tuple(self._customer_ids)

    def add_customer(self, customer_id: int) -> None:
        self._customer_ids.append(customer_id)

    def has_customer(self, customer_id: int) -> bool:
        return customer_id in self._customer_ids
