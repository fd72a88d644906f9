"""Node endpoints."""

from superhub.models.node import Node, NodeLoad
from superhub.models.server import Resources
from superhub.transport.request import HTTPMethod, invoke_endpoint, list_of


class NodesAPI:
    def get_nodes(self) -> list[Node] | None:
        return invoke_endpoint(self, HTTPMethod.GET, "/nodes", list_of(Node.from_dict))

    def get_node(self, node_id: int) -> Node | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/nodes/{node_id}", Node.from_dict)

    def get_node_limits(self, node_id: int) -> Resources | None:
        """Resources users may buy on the node."""
        return invoke_endpoint(self, HTTPMethod.GET, f"/nodes/{node_id}/limits", Resources.from_dict)

    def update_node_limits(self, node_id: int, limits: Resources) -> Resources | None:
        return invoke_endpoint(self, HTTPMethod.PUT, f"/nodes/{node_id}/limits", Resources.from_dict, body=limits)

    def get_node_load(self, node_id: int) -> NodeLoad | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/nodes/{node_id}/load", NodeLoad.from_dict)

    def update_node_load(self, node_id: int, load: NodeLoad) -> NodeLoad | None:
        return invoke_endpoint(self, HTTPMethod.PUT, f"/nodes/{node_id}/load", NodeLoad.from_dict, body=load)
