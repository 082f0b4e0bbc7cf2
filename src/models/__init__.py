"""Pydantic models for customers, interactions, representatives and reports."""

from models.response import OperationResult, OperationStatus  # noqa: F401
from models.interaction import (  # noqa: F401
    BaseInteraction,
    Call,
    Email,
    Interaction,
    InteractionType,
    Meeting,
)
from models.customer import (  # noqa: F401
    CorporateProfile,
    Customer,
    CustomerProfile,
    CustomerType,
    RegularProfile,
    VipProfile,
)
from models.representative import SalesRepresentative  # noqa: F401
from models.report import (  # noqa: F401
    InteractionTimeEntry,
    InteractionTimeReport,
    SystemReport,
)
