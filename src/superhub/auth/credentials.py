"""Credential strategies applied to outbound SuperHub requests.

A strategy only ever touches request headers. It performs no I/O and no
validation: a malformed token is sent as-is and rejected by the API.

Example:
    ```python
    from uuid import UUID

    from superhub.auth import PersistentToken

    token = PersistentToken(UUID("2f1c..."), "secret")
    token.authorize_request(request)
    # Authorization: Persistent 2f1c...
    # X-Access-Token: secret
    ```
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from uuid import UUID

import httpx

from superhub.auth.exceptions import CredentialError
from superhub.auth.resolver import (
    ACCESS_TOKEN_ENV_VAR,
    ACCESS_TOKEN_FILE_ENV_VAR,
    TOKEN_ID_ENV_VAR,
    CredentialResolver,
)

logger = logging.getLogger(__name__)

PERSISTENT_SCHEME = "Persistent"
ACCESS_TOKEN_HEADER = "X-Access-Token"


class Credentials(ABC):
    """Capability to authorize a request before it is sent."""

    @abstractmethod
    def authorize_request(self, request: httpx.Request) -> None:
        """Set authorization headers on ``request``."""


@dataclass
class EmptyCredentials(Credentials):
    """Anonymous access; leaves the request untouched."""

    def authorize_request(self, request: httpx.Request) -> None:
        pass


@dataclass
class PersistentToken(Credentials):
    """Long-lived token pair: an opaque UUID id plus a secret access token."""

    id: UUID
    access_token: str = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.id, UUID):
            self.id = UUID(str(self.id))

    def authorize_request(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"{PERSISTENT_SCHEME} {self.id}"
        request.headers[ACCESS_TOKEN_HEADER] = self.access_token

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        id_env_var: str = TOKEN_ID_ENV_VAR,
        token_env_var: str = ACCESS_TOKEN_ENV_VAR,
        token_file_env_var: str = ACCESS_TOKEN_FILE_ENV_VAR,
    ) -> "PersistentToken":
        """Build a token from the environment (or a .env file).

        The secret is taken from ``token_env_var`` or, failing that, from the
        file named by ``token_file_env_var``.

        Raises:
            CredentialNotFoundError: If the id or the secret is missing.
            CredentialError: If the id is not a valid UUID.
        """
        resolver = resolver or CredentialResolver()

        raw_id = resolver.resolve(env_var_name=id_env_var, required=True, mask_in_logs=False)
        access_token = resolver.resolve_secret(token_env_var, token_file_env_var, required=True)

        try:
            token_id = UUID(raw_id)
        except ValueError as e:
            raise CredentialError(f"Persistent token id from '{id_env_var}' is not a UUID: {raw_id!r}") from e

        logger.debug(f"Using persistent token {token_id}")
        return cls(token_id, access_token)
