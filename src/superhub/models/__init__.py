"""Data shapes of the SuperHub API.

Models are built fresh from every response and never mutated. Nullable wire
fields are ``None`` when absent, which is distinct from a zero value.
"""

from superhub.models.node import Node, NodeComponent, NodeLoad, NodeLocation, NodePrices
from superhub.models.payment import (
    Payment,
    PaymentAmount,
    PaymentCreationForm,
    PaymentMode,
    PaymentSource,
    PaymentSourceType,
)
from superhub.models.server import (
    ExternalServer,
    FeatureLimits,
    Resources,
    Server,
    ServerPricing,
    ServerState,
)
from superhub.models.user import CURRENT_USER_REFERENCE, LinkedDiscord, LinkedVK, Referral, User

__all__ = [
    "CURRENT_USER_REFERENCE",
    "ExternalServer",
    "FeatureLimits",
    "LinkedDiscord",
    "LinkedVK",
    "Node",
    "NodeComponent",
    "NodeLoad",
    "NodeLocation",
    "NodePrices",
    "Payment",
    "PaymentAmount",
    "PaymentCreationForm",
    "PaymentMode",
    "PaymentSource",
    "PaymentSourceType",
    "Referral",
    "Resources",
    "Server",
    "ServerPricing",
    "ServerState",
    "User",
]
