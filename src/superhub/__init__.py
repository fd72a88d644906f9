"""SuperHub - Python client for the SuperHub hosting billing and control panel API.

This library provides:
- Typed models of servers, nodes, users and payments
- Pluggable request authorization (anonymous or persistent token)
- A single request/response pipeline with typed errors
- Configuration from environment variables and .env files

Example:
    ```python
    from superhub import SuperhubClient

    # Reads SUPERHUB_BASE_URL, SUPERHUB_TOKEN_ID and SUPERHUB_ACCESS_TOKEN
    with SuperhubClient.from_env() as client:
        for node in client.get_nodes():
            print(node.name, node.location.code, node.load)
    ```
"""

from superhub.auth import EmptyCredentials, PersistentToken
from superhub.client import DEFAULT_BASE_URL, SuperhubClient

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "EmptyCredentials",
    "PersistentToken",
    "SuperhubClient",
    "__version__",
]
