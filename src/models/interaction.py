"""
Interaction models.

An interaction is an immutable record of one customer contact. The three
variants share a base record and are told apart by the ``kind`` literal, so a
list of interactions validates as a discriminated union.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class InteractionType(str, Enum):
    """Interaction discriminant."""

    CALL = "Call"
    EMAIL = "Email"
    MEETING = "Meeting"


class BaseInteraction(BaseModel):
    """Fields common to every interaction variant."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    content: str

    def duration_contribution(self) -> int:
        """Minutes this record adds to the base interaction-time sum."""
        return 0

    def describe(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        raise NotImplementedError


class Call(BaseInteraction):
    """Phone call with a duration in minutes."""

    kind: Literal[InteractionType.CALL] = InteractionType.CALL
    duration_minutes: int = Field(ge=0)

    def duration_contribution(self) -> int:
        return self.duration_minutes

    def describe(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        stamp = self.timestamp.strftime(timestamp_format)
        return (
            f"Call on {stamp} (Duration: {self.duration_minutes} minutes): "
            f"{self.content}"
        )


class Email(BaseInteraction):
    """Email with a subject line."""

    kind: Literal[InteractionType.EMAIL] = InteractionType.EMAIL
    subject: str

    def describe(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        stamp = self.timestamp.strftime(timestamp_format)
        return f"Email on {stamp} (Subject: {self.subject}): {self.content}"


class Meeting(BaseInteraction):
    """In-person meeting at a location."""

    kind: Literal[InteractionType.MEETING] = InteractionType.MEETING
    location: str
    duration_minutes: int = Field(ge=0)

    def duration_contribution(self) -> int:
        return self.duration_minutes

    def describe(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        stamp = self.timestamp.strftime(timestamp_format)
        return (
            f"Meeting on {stamp} at {self.location} "
            f"(Duration: {self.duration_minutes} minutes): {self.content}"
        )


Interaction = Annotated[Union[Call, Email, Meeting], Field(discriminator="kind")]
