"""
Customer models.

A customer is one shared base record (identity, contact details, interaction
log) carrying a variant profile. The profile's ``customer_type`` tag selects
the reporting multiplier, the customer-specific action and the optional
capabilities (loyalty points, contract renewal) from the tables below.
"""

from enum import Enum
from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from models.interaction import DEFAULT_TIMESTAMP_FORMAT, Interaction
from utils.error_handling import UnsupportedOperationError, ValidationError


class CustomerType(str, Enum):
    """Customer variant discriminant."""

    REGULAR = "Regular"
    VIP = "VIP"
    CORPORATE = "Corporate"


class RegularProfile(BaseModel):
    """Regular customers are targeted by market segment."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    customer_type: Literal[CustomerType.REGULAR] = CustomerType.REGULAR
    segment: str


class VipProfile(BaseModel):
    """VIP customers have a dedicated account manager and earn loyalty points."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    customer_type: Literal[CustomerType.VIP] = CustomerType.VIP
    account_manager: str
    loyalty_points: float = Field(default=0.0, ge=0)


class CorporateProfile(BaseModel):
    """Corporate accounts are billed through an annual contract."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    customer_type: Literal[CustomerType.CORPORATE] = CustomerType.CORPORATE
    company_name: str
    employee_count: int = Field(gt=0)
    annual_contract: float = Field(ge=0)


CustomerProfile = Annotated[
    Union[RegularProfile, VipProfile, CorporateProfile],
    Field(discriminator="customer_type"),
]


# -------------------------
# Interaction-time multipliers
# -------------------------

VIP_TIME_MULTIPLIER = 1.2

# (employee threshold, multiplier); a tier applies strictly above its threshold.
CORPORATE_TIME_TIERS: Tuple[Tuple[int, float], ...] = ((1000, 1.5), (100, 1.3))


def _corporate_multiplier(profile: CorporateProfile) -> float:
    for threshold, multiplier in CORPORATE_TIME_TIERS:
        if profile.employee_count > threshold:
            return multiplier
    return 1.0


TIME_MULTIPLIERS: Dict[CustomerType, Callable[[Any], float]] = {
    CustomerType.REGULAR: lambda profile: 1.0,
    CustomerType.VIP: lambda profile: VIP_TIME_MULTIPLIER,
    CustomerType.CORPORATE: _corporate_multiplier,
}


# -------------------------
# Customer-specific actions
# -------------------------

SPECIFIC_ACTIONS: Dict[CustomerType, Callable[[str, Any], str]] = {
    CustomerType.REGULAR: lambda name, profile: (
        f"Sending regular promotional materials to {name} "
        f"in segment {profile.segment}"
    ),
    CustomerType.VIP: lambda name, profile: (
        f"Scheduling quarterly review with {name} "
        f"and account manager {profile.account_manager}"
    ),
    CustomerType.CORPORATE: lambda name, profile: (
        f"Arranging corporate training session for {profile.company_name} "
        f"with {profile.employee_count} potential users"
    ),
}

LOYALTY_PROGRAM_TYPES = frozenset({CustomerType.VIP})
CONTRACT_HOLDER_TYPES = frozenset({CustomerType.CORPORATE})


class Customer(BaseModel):
    """
    Tracked business contact.

    Identity, contact and profile fields are frozen. The interaction log is
    append-only and exposed as a tuple. Only ``add_loyalty_points`` and
    ``renew_contract`` swap in an updated profile of the same variant.
    """

    model_config = ConfigDict(validate_assignment=True)

    customer_id: int = Field(ge=1, frozen=True)
    name: str = Field(frozen=True)
    email: str = Field(frozen=True)
    phone: str = Field(frozen=True)
    profile: CustomerProfile = Field(frozen=True)

    _interactions: List[Interaction] = PrivateAttr(default_factory=list)

    @property
    def customer_type(self) -> CustomerType:
        return self.profile.customer_type

    @property
    def interactions(self) -> Tuple[Interaction, ...]:
        return tuple(self._interactions)

    def add_interaction(self, interaction: Interaction) -> None:
        self._interactions.append(interaction)

    # ------------------------------------------------------------------ #
    # Reporting
    # ------------------------------------------------------------------ #

    def base_interaction_minutes(self) -> int:
        """Sum of Call and Meeting durations; emails count as zero."""
        return sum(i.duration_contribution() for i in self._interactions)

    def total_interaction_minutes(self) -> int:
        """Base minutes scaled by the variant multiplier, truncated toward zero."""
        multiplier = TIME_MULTIPLIERS[self.customer_type](self.profile)
        return int(self.base_interaction_minutes() * multiplier)

    def specific_action(self) -> str:
        """Describe the action the business takes for this kind of customer."""
        return SPECIFIC_ACTIONS[self.customer_type](self.name, self.profile)

    def describe_interactions(
        self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    ) -> List[str]:
        if not self._interactions:
            return [f"No interactions recorded for {self.name}"]
        lines = [f"Interactions for {self.name} ({self.customer_type.value}):"]
        lines.extend(i.describe(timestamp_format) for i in self._interactions)
        return lines

    # ------------------------------------------------------------------ #
    # Variant capabilities
    # ------------------------------------------------------------------ #

    @property
    def earns_loyalty_points(self) -> bool:
        return self.customer_type in LOYALTY_PROGRAM_TYPES

    @property
    def holds_contract(self) -> bool:
        return self.customer_type in CONTRACT_HOLDER_TYPES

    @property
    def loyalty_points(self) -> Optional[float]:
        return self.profile.loyalty_points if self.earns_loyalty_points else None

    def add_loyalty_points(self, amount: float) -> float:
        """Credit loyalty points and return the new balance."""
        if not self.earns_loyalty_points:
            raise UnsupportedOperationError(
                f"{self.customer_type.value} customers do not earn loyalty points"
            )
        if amount < 0:
            raise ValidationError(f"Loyalty credit must be non-negative, got {amount}")
        total = self.profile.loyalty_points + amount
        self._replace_profile(loyalty_points=total)
        return total

    def renew_contract(self, new_amount: float) -> float:
        """Replace the annual contract amount and return the previous one."""
        if not self.holds_contract:
            raise UnsupportedOperationError(
                f"{self.customer_type.value} customers do not hold contracts"
            )
        if new_amount < 0:
            raise ValidationError(
                f"Contract amount must be non-negative, got {new_amount}"
            )
        previous = self.profile.annual_contract
        self._replace_profile(annual_contract=float(new_amount))
        return previous

    def _replace_profile(self, **changes: Any) -> None:
        # The field is frozen against callers; bypass the guard for internal updates.
        object.__setattr__(self, "profile", self.profile.model_copy(update=changes))
