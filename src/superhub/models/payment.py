"""Payments: the history of balance changes.

Positive amounts are top-ups (by the user or the hosting staff), negative
amounts are charges, e.g. for hosting services.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from superhub.models._fields import optional_str, parse_bool, parse_datetime, parse_optional_datetime


class PaymentSourceType(StrEnum):
    """The action that caused a payment."""

    TOP_UP = "TOP_UP"
    SERVER_SERVICE = "SERVER_SERVICE"  # charge for a game server
    REFERRAL = "REFERRAL"  # share of top-ups by invited users
    REFERRAL_WELCOME_BONUS = "REFERRAL_WELCOME_BONUS"
    OTHER = "OTHER"


class PaymentMode(StrEnum):
    PRODUCTION = "PRODUCTION"
    TEST = "TEST"  # processed fully but the balance is left untouched


@dataclass(frozen=True)
class PaymentAmount:
    sum: float
    currency: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaymentAmount":
        return cls(sum=float(data["sum"]), currency=data["currency"])


@dataclass(frozen=True)
class PaymentSource:
    """Why a payment was created; usable for filtering and grouping.

    ``id`` is always empty for TOP_UP and OTHER and always set for the other
    types, e.g. the inviting user for REFERRAL.
    """

    type: PaymentSourceType = PaymentSourceType.OTHER
    id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaymentSource":
        return cls(
            type=PaymentSourceType(data.get("type") or PaymentSourceType.OTHER),
            id=optional_str(data.get("id")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": str(self.type)}
        if self.id:
            data["id"] = self.id
        return data


@dataclass(frozen=True)
class Payment:
    """A single balance change.

    Attributes:
        id: Currently 16 bytes in hex; the format is not guaranteed.
        user_id: User whose balance the payment changes.
        completed: False until the balance change is applied, e.g. a top-up
            stays incomplete until the user pays.
    """

    id: str
    user_id: int
    amount: PaymentAmount
    source: PaymentSource
    mode: PaymentMode
    completed: bool
    created_at: datetime
    description: str | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Payment":
        return cls(
            id=str(data["id"]),
            user_id=int(data["userId"]),
            amount=PaymentAmount.from_dict(data["amount"]),
            source=PaymentSource.from_dict(data.get("source") or {}),
            mode=PaymentMode(data["mode"]),
            completed=parse_bool(data["completed"]),
            created_at=parse_datetime(data["createdAt"]),
            description=optional_str(data.get("description")),
            updated_at=parse_optional_datetime(data.get("updatedAt")),
        )


@dataclass(frozen=True)
class PaymentCreationForm:
    """Body of a payment creation request. ``amount`` is in rubles."""

    amount: float
    description: str | None = None
    source: PaymentSource | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "description": self.description,
            "source": self.source.to_dict() if self.source is not None else None,
        }
