"""Server endpoints."""

from superhub.models.server import ExternalServer, Server, ServerPricing
from superhub.transport.request import HTTPMethod, invoke_endpoint, invoke_void_endpoint, list_of


class ServersAPI:
    def get_servers(self) -> list[Server] | None:
        """All servers in the system."""
        return invoke_endpoint(self, HTTPMethod.GET, "/servers", list_of(Server.from_dict))

    def get_server(self, server_id: int) -> Server | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/servers/{server_id}", Server.from_dict)

    def get_external_server(self, server_id: int) -> ExternalServer | None:
        """Panel-side data of the server with internal id ``server_id``."""
        return invoke_endpoint(self, HTTPMethod.GET, f"/servers/{server_id}/external", ExternalServer.from_dict)

    def get_server_pricing(self, server_id: int) -> ServerPricing | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/servers/{server_id}/pricing", ServerPricing.from_dict)

    def block_server(self, server_id: int) -> None:
        invoke_void_endpoint(self, HTTPMethod.POST, f"/servers/{server_id}/blocking")

    def unblock_server(self, server_id: int) -> None:
        invoke_void_endpoint(self, HTTPMethod.DELETE, f"/servers/{server_id}/blocking")
