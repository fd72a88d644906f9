"""Endpoint wrappers, one mixin per resource, combined in SuperhubClient."""

from superhub.api.nodes import NodesAPI
from superhub.api.payments import PaymentsAPI
from superhub.api.servers import ServersAPI
from superhub.api.users import UsersAPI

__all__ = ["NodesAPI", "PaymentsAPI", "ServersAPI", "UsersAPI"]
