"""Servers owned by SuperHub users."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from superhub.models._fields import optional_float, optional_str, parse_bool, parse_datetime, parse_optional_datetime

if TYPE_CHECKING:
    from superhub.client import SuperhubClient


class ServerState(IntEnum):
    """Whether the server is ready after installation.

    Does not reflect whether the server is reachable right now.
    """

    FAILED = -1  # the system could not finish creating the server
    UNKNOWN = 0  # still being created, or state unknown
    NORMAL = 1


@dataclass(frozen=True)
class Resources:
    """CPU, memory and disk of a server or the limits of a node."""

    cpu: int  # percent, 100 = one core
    memory: int  # MB
    disk: int  # MB

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Resources":
        return cls(cpu=int(data["cpu"]), memory=int(data["memory"]), disk=int(data["disk"]))

    def to_dict(self) -> dict[str, Any]:
        return {"cpu": self.cpu, "memory": self.memory, "disk": self.disk}


@dataclass(frozen=True)
class FeatureLimits:
    databases: int
    backups: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FeatureLimits":
        return cls(databases=int(data["databases"]), backups=int(data["backups"]))


@dataclass(frozen=True)
class ExternalServer:
    """The server as known to the game panel (Pterodactyl)."""

    control_url: str
    name: str
    identifier: str
    resource_limits: Resources
    feature_limits: FeatureLimits
    is_suspended: bool
    node_id: int
    nest_id: int
    egg_id: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExternalServer":
        return cls(
            control_url=data["controlUrl"],
            name=data["name"],
            identifier=data["identifier"],
            resource_limits=Resources.from_dict(data["resourceLimits"]),
            feature_limits=FeatureLimits.from_dict(data["featureLimits"]),
            is_suspended=parse_bool(data["suspended"]),
            node_id=int(data["nodeId"]),
            nest_id=int(data["nestId"]),
            egg_id=int(data["eggId"]),
        )


@dataclass(frozen=True)
class ServerPricing:
    """Current price of a server.

    ``freeze_cost`` is only present while the server is frozen.
    """

    cost: float
    sale: float
    freeze_cost: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServerPricing":
        return cls(
            cost=float(data["cost"]),
            sale=float(data["sale"]),
            freeze_cost=optional_float(data.get("freezeCost")),
        )


@dataclass(frozen=True)
class Server:
    """A server owned by a user, as shown in the control panel.

    Resource limits live on the external server (see ``external_server``).

    Attributes:
        id: Identifier in the billing system, unrelated to the panel id.
        ptero_id: Identifier of the matching panel server.
        cost: Base cost in rubles with the discount applied.
        sale: Discount between 0 (none) and 1 (free).
        freeze_cost: Cost while frozen; present only when frozen.
        tariff_id: Present only when a ready-made tariff was chosen.
        domain: Domain, or ``ip:port`` when no domain is configured.
        tcpshield_record: CNAME content for TCPShield, when enabled.
        external_server: Present only for endpoints that embed it.
        expires_at: End of the validity period, usually for free servers.
            Unrelated to blocking for non-payment.
        frozen_at: When the user froze the server. Also set when the server
            is blocked for non-payment; see ``is_frozen_by_user``.
    """

    id: int
    ptero_id: int
    owner_id: int
    state: ServerState
    cost: float
    sale: float
    domain: str
    created_at: datetime
    updated_at: datetime
    freeze_cost: float | None = None
    tariff_id: str | None = None
    tcpshield_record: str | None = None
    external_server: ExternalServer | None = None
    expires_at: datetime | None = None
    frozen_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Server":
        external = data.get("externalServer")
        return cls(
            id=int(data["id"]),
            ptero_id=int(data["pteroId"]),
            owner_id=int(data["ownerId"]),
            state=ServerState(data["state"]),
            cost=float(data["cost"]),
            sale=float(data["sale"]),
            domain=data["domain"],
            created_at=parse_datetime(data["createdAt"]),
            updated_at=parse_datetime(data["updatedAt"]),
            freeze_cost=optional_float(data.get("freezeCost")),
            tariff_id=optional_str(data.get("tariffId")),
            tcpshield_record=optional_str(data.get("tcpshieldRecord")),
            external_server=ExternalServer.from_dict(external) if external is not None else None,
            expires_at=parse_optional_datetime(data.get("expiresAt")),
            frozen_at=parse_optional_datetime(data.get("frozenAt")),
        )

    @property
    def is_frozen_by_user(self) -> bool:
        """True if the user froze the server, as opposed to it being blocked for non-payment."""
        return self.frozen_at is not None and self.freeze_cost is not None

    @property
    def is_temporary(self) -> bool:
        return self.expires_at is not None

    def get_external_server(self, client: "SuperhubClient") -> ExternalServer | None:
        return client.get_external_server(self.id)

    def get_pricing(self, client: "SuperhubClient") -> ServerPricing | None:
        return client.get_server_pricing(self.id)

    def block(self, client: "SuperhubClient") -> None:
        client.block_server(self.id)

    def unblock(self, client: "SuperhubClient") -> None:
        client.unblock_server(self.id)
