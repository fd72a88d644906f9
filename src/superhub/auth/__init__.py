"""Authorization and configuration of SuperHub clients.

Credentials decide how a request is authorized; the resolver finds settings
and secrets in explicit values, the environment, a .env file or secret files.

Example:
    ```python
    from superhub.auth import PersistentToken

    # SUPERHUB_TOKEN_ID plus SUPERHUB_ACCESS_TOKEN or SUPERHUB_ACCESS_TOKEN_FILE
    token = PersistentToken.from_env()
    ```
"""

from superhub.auth.credentials import Credentials, EmptyCredentials, PersistentToken
from superhub.auth.exceptions import CredentialError, CredentialFileError, CredentialNotFoundError
from superhub.auth.resolver import CredentialResolver

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "EmptyCredentials",
    "PersistentToken",
]
