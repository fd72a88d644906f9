"""SuperHub API clients.

Example:
    ```python
    from superhub import PersistentToken, SuperhubClient

    with SuperhubClient(PersistentToken(token_id, secret)) as client:
        me = client.get_current_user()
        for server in me.get_owned_servers(client, external=True):
            print(server.domain, server.is_frozen_by_user)
    ```
"""

import posixpath

import httpx

from superhub.api import NodesAPI, PaymentsAPI, ServersAPI, UsersAPI
from superhub.auth.credentials import Credentials, EmptyCredentials, PersistentToken
from superhub.auth.resolver import BASE_URL_ENV_VAR, TOKEN_ID_ENV_VAR, CredentialResolver
from superhub.errors.exceptions import MalformedURLError

DEFAULT_BASE_URL = "https://api.superhub.host/v1"

_SUPPORTED_SCHEMES = frozenset(["http", "https"])


def join_url_path(base_path: str, endpoint: str) -> str:
    """Join two URL paths segment-wise.

    Duplicate slashes collapse, ``.`` and ``..`` are resolved and the result
    always starts with one slash and never ends with one (unless it is the
    root), so ``"/v1"`` joined with ``"/servers/"``, ``"servers/"``,
    ``"/servers"`` or ``"servers"`` is always ``"/v1/servers"``.
    """
    segments = [segment for segment in f"{base_path}/{endpoint}".split("/") if segment]
    return posixpath.normpath("/" + "/".join(segments))


class BaseClient:
    """Holds what every request needs: base URL, credentials and transport.

    The client keeps no other state between calls. It is as safe to share
    between threads as the underlying ``httpx.Client``.

    Args:
        credentials: Strategy applied to each request. Defaults to
            EmptyCredentials.
        base_url: API root. None or an empty string means DEFAULT_BASE_URL.
        http_client: httpx.Client to send requests with. When omitted, one is
            created on first use and closed by ``close()``. Configure
            timeouts, proxies and the like on this client.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.credentials: Credentials = credentials if credentials is not None else EmptyCredentials()
        self.base_url: str = base_url or DEFAULT_BASE_URL
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Configure a client from environment variables or a .env file.

        ``SUPERHUB_BASE_URL`` overrides the base URL. When
        ``SUPERHUB_TOKEN_ID`` is set, a persistent token is built from it and
        ``SUPERHUB_ACCESS_TOKEN`` (or ``SUPERHUB_ACCESS_TOKEN_FILE``);
        otherwise requests are anonymous.

        Raises:
            CredentialNotFoundError: If the token id is set but no secret is.
            CredentialError: If the token id is not a UUID.
        """
        resolver = resolver or CredentialResolver()

        base_url = resolver.resolve(env_var_name=BASE_URL_ENV_VAR, mask_in_logs=False)

        credentials = None
        if resolver.resolve(env_var_name=TOKEN_ID_ENV_VAR, mask_in_logs=False):
            credentials = PersistentToken.from_env(resolver)

        return cls(credentials=credentials, base_url=base_url, http_client=http_client)

    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client()
        return self._http_client

    def resolve(self, endpoint: str) -> str:
        """Absolute URL of ``endpoint`` under the base URL.

        Scheme, host and port come from the base URL; the paths are joined
        with :func:`join_url_path`.

        Raises:
            MalformedURLError: If the base URL cannot be parsed or is not an
                absolute http(s) URL.
        """
        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise MalformedURLError(f"parsing url: {e}", url=self.base_url) from e

        if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
            raise MalformedURLError(f"parsing url: not an absolute http(s) URL: {self.base_url!r}", url=self.base_url)

        return str(url.copy_with(path=join_url_path(url.path, endpoint)))

    def close(self) -> None:
        """Close the httpx client if this client created it."""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} base_url={self.base_url!r} credentials={type(self.credentials).__name__}>"


class SuperhubClient(ServersAPI, NodesAPI, UsersAPI, PaymentsAPI, BaseClient):
    """Client for the SuperHub API with every endpoint wrapper attached."""

    pass
