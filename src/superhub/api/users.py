"""User endpoints."""

from superhub.models.server import Server
from superhub.models.user import CURRENT_USER_REFERENCE, User
from superhub.transport.request import HTTPMethod, invoke_endpoint, list_of


class UsersAPI:
    def _get_user(self, reference: str) -> User | None:
        return invoke_endpoint(self, HTTPMethod.GET, f"/users/{reference}", User.from_dict)

    def get_user(self, user_id: int) -> User | None:
        """User with the numeric id ``user_id``; see also get_current_user."""
        return self._get_user(str(int(user_id)))

    def get_current_user(self) -> User | None:
        """Owner of the credentials the client authorizes with."""
        return self._get_user(CURRENT_USER_REFERENCE)

    def get_owned_servers(self, owner_id: int, external: bool = False) -> list[Server] | None:
        """Servers owned by ``owner_id``.

        With ``external=True`` each server carries its external server,
        where one exists.
        """
        return invoke_endpoint(
            self,
            HTTPMethod.GET,
            f"/users/{owner_id}/servers",
            list_of(Server.from_dict),
            params={"external": external},
        )
