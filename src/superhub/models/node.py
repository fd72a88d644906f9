"""Hosting nodes: the physical machines servers are placed on."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from superhub.models._fields import parse_bool
from superhub.models.server import Resources

if TYPE_CHECKING:
    from superhub.client import SuperhubClient


class NodeComponent(StrEnum):
    CPU = "cpu"


@dataclass(frozen=True)
class NodeLocation:
    country: str
    city: str
    code: str  # e.g. MSK-1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodeLocation":
        return cls(country=data["country"], city=data["city"], code=data["code"])


@dataclass(frozen=True)
class NodePrices:
    """Parameters used to price a server bought on the node.

    All costs are per day.
    """

    cpu: float  # per core
    memory: float  # per GB
    disk: float  # per GB above free_disk
    backups: float  # per GB of extra backups
    free_disk: float  # GB
    databases: float
    multiplier: float
    migration_bonus: float  # discount between 0 and 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodePrices":
        return cls(
            cpu=float(data["cpu"]),
            memory=float(data["memory"]),
            disk=float(data["disk"]),
            backups=float(data["backups"]),
            free_disk=float(data["freeDisk"]),
            databases=float(data["databases"]),
            multiplier=float(data["multiplier"]),
            migration_bonus=float(data["migrationBonus"]),
        )


@dataclass(frozen=True)
class NodeLoad:
    """Load of a node between 0 (idle) and 1 (fully loaded)."""

    load: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NodeLoad":
        return cls(load=float(data["load"]))

    def to_dict(self) -> dict[str, Any]:
        return {"load": self.load}


@dataclass(frozen=True)
class Node:
    """A hosting node as offered when ordering a server.

    The id always matches the node id in the panel.

    Attributes:
        components: Installed hardware keyed by NodeComponent value.
            Currently only the CPU model is reported.
        limits: Resources users may buy on this node.
        load: Between 0 (idle) and 1 (fully loaded).
        hidden: Hidden nodes are not offered when ordering.
    """

    id: int
    name: str
    hostname: str
    limits: Resources
    load: float
    location: NodeLocation
    prices: NodePrices
    hidden: bool
    components: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            hostname=data["hostname"],
            limits=Resources.from_dict(data["limits"]),
            load=float(data["load"]),
            location=NodeLocation.from_dict(data["location"]),
            prices=NodePrices.from_dict(data["prices"]),
            hidden=parse_bool(data["hidden"]),
            components=dict(data.get("components") or {}),
        )

    @property
    def cpu_model(self) -> str | None:
        return self.components.get(NodeComponent.CPU)

    def get_limits(self, client: "SuperhubClient") -> Resources | None:
        return client.get_node_limits(self.id)

    def update_limits(self, client: "SuperhubClient", limits: Resources) -> Resources | None:
        return client.update_node_limits(self.id, limits)

    def get_load(self, client: "SuperhubClient") -> NodeLoad | None:
        return client.get_node_load(self.id)

    def update_load(self, client: "SuperhubClient", load: NodeLoad) -> NodeLoad | None:
        return client.update_node_load(self.id, load)
