"""Users registered on the hosting site."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from superhub.models._fields import optional_bool, optional_int, optional_str, parse_datetime, parse_optional_datetime

if TYPE_CHECKING:
    from superhub.client import SuperhubClient
    from superhub.models.payment import Payment, PaymentCreationForm
    from superhub.models.server import Server

# Path reference to the owner of the credentials in use
CURRENT_USER_REFERENCE = "@self"


@dataclass(frozen=True)
class LinkedDiscord:
    id: str | None = None
    acquired_link_bonus: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkedDiscord":
        return cls(id=optional_str(data.get("id")), acquired_link_bonus=optional_bool(data.get("linkBonus")))


@dataclass(frozen=True)
class LinkedVK:
    id: int | None = None
    acquired_link_bonus: bool = False
    acquired_feedback_bonus: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkedVK":
        return cls(
            id=optional_int(data.get("id")),
            acquired_link_bonus=optional_bool(data.get("linkBonus")),
            acquired_feedback_bonus=optional_bool(data.get("feedbackBonus")),
        )


@dataclass(frozen=True)
class Referral:
    """Referral program state of a user.

    Attributes:
        acquired_bonus: Bonus for the first top-up was granted.
        code: The user's own referral code.
        user_id: Owner of the code used at registration, if any.
    """

    code: str
    acquired_bonus: bool = False
    user_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Referral":
        return cls(
            code=data.get("code", ""),
            acquired_bonus=optional_bool(data.get("bonus")),
            user_id=optional_int(data.get("userId")),
        )


@dataclass(frozen=True)
class User:
    """A registered user as shown in the control panel.

    The API always returns ``discord`` and ``vk``, even when no account is
    linked; check ``has_linked_discord`` / ``has_linked_vk`` instead.

    Attributes:
        id: Identifier in the billing system, unrelated to the panel id.
        balance: Current balance in rubles.
        had_test_server: False means the user may still order a test server.
    """

    id: int
    email: str
    name: str
    balance: float
    discord: LinkedDiscord
    vk: LinkedVK
    referral: Referral
    has_mfa_enabled: bool
    had_test_server: bool
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=int(data["id"]),
            email=data["email"],
            name=data["name"],
            balance=float(data["balance"]),
            discord=LinkedDiscord.from_dict(data.get("discord") or {}),
            vk=LinkedVK.from_dict(data.get("vk") or {}),
            referral=Referral.from_dict(data.get("referral") or {}),
            has_mfa_enabled=optional_bool(data.get("hasMfaEnabled")),
            had_test_server=optional_bool(data.get("hadTestServer")),
            created_at=parse_datetime(data["createdAt"]),
            updated_at=parse_optional_datetime(data.get("updatedAt")),
        )

    @property
    def has_linked_discord(self) -> bool:
        return self.discord.id is not None

    @property
    def has_linked_vk(self) -> bool:
        return self.vk.id is not None

    @property
    def has_referral(self) -> bool:
        """True if the user registered with another user's referral code."""
        return self.referral.user_id is not None

    def get_owned_servers(self, client: "SuperhubClient", external: bool = False) -> "list[Server] | None":
        """Servers owned by this user.

        With ``external=True`` each server carries its external server,
        where one exists.
        """
        return client.get_owned_servers(self.id, external)

    def get_payments(self, client: "SuperhubClient") -> "list[Payment] | None":
        return client.get_user_payments(self.id)

    def create_payment(self, client: "SuperhubClient", form: "PaymentCreationForm") -> "Payment | None":
        return client.create_payment(self.id, form)
