"""Lookup of SuperHub settings and secrets.

A setting is taken from the first source that has it:

1. an explicit value passed by the caller
2. the process environment
3. a ``.env`` file (parsed with python-dotenv, never exported to ``os.environ``)
4. a default

Secrets may also live in a file whose path is itself a setting, e.g.
``SUPERHUB_ACCESS_TOKEN_FILE=/run/secrets/superhub``.

Example:
    ```python
    from superhub.auth import CredentialResolver

    resolver = CredentialResolver(dotenv_path="/etc/superhub/.env")
    base_url = resolver.resolve(env_var_name="SUPERHUB_BASE_URL", mask_in_logs=False)
    secret = resolver.resolve_secret("SUPERHUB_ACCESS_TOKEN", "SUPERHUB_ACCESS_TOKEN_FILE", required=True)
    ```
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import dotenv_values, find_dotenv

from superhub.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

BASE_URL_ENV_VAR = "SUPERHUB_BASE_URL"
TOKEN_ID_ENV_VAR = "SUPERHUB_TOKEN_ID"
ACCESS_TOKEN_ENV_VAR = "SUPERHUB_ACCESS_TOKEN"
ACCESS_TOKEN_FILE_ENV_VAR = "SUPERHUB_ACCESS_TOKEN_FILE"

MASK = "***"


def _shown(value: str, mask: bool) -> str:
    return MASK if mask else value


class CredentialResolver:
    """Resolves settings from explicit values, the environment, a .env file and defaults.

    The .env file is read at most once, on the first lookup that reaches it.

    Args:
        dotenv_path: Path of the .env file. When None, python-dotenv looks for
            one in the working directory and its parents.
        load_dotenv: Set to False to ignore .env files entirely.
    """

    def __init__(self, dotenv_path: str | Path | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._use_dotenv = load_dotenv
        self._dotenv: dict[str, str] | None = None
        self._lock = Lock()

    @property
    def dotenv(self) -> dict[str, str]:
        """Entries of the .env file; empty when there is none."""
        if self._dotenv is None:
            with self._lock:
                if self._dotenv is None:
                    self._dotenv = self._read_dotenv()
        return self._dotenv

    def _read_dotenv(self) -> dict[str, str]:
        if not self._use_dotenv:
            return {}

        path = self._dotenv_path or find_dotenv(usecwd=True)
        if not path:
            return {}

        try:
            entries = dotenv_values(path)
        except OSError as e:
            logger.warning(f"Ignoring unreadable .env file {path}: {e}")
            return {}

        logger.debug(f"Read {len(entries)} entries from {path}")
        # Keys without a value ("KEY" alone on a line) parse as None
        return {key: value for key, value in entries.items() if value is not None}

    def lookup(self, env_var_name: str) -> tuple[str | None, str | None]:
        """Value of ``env_var_name`` and where it came from, or ``(None, None)``."""
        if env_var_name in os.environ:
            return os.environ[env_var_name], f"environment variable '{env_var_name}'"
        if env_var_name in self.dotenv:
            return self.dotenv[env_var_name], f".env entry '{env_var_name}'"
        return None, None

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Variable to look up in the environment and .env file.
            default: Used when no other source has the setting.
            required: Raise instead of returning None when nothing is found.
            mask_in_logs: Log ``***`` instead of the value. Turn off for
                non-secret settings such as the base URL.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        if value is not None:
            result, source = value, "explicit value"
        elif env_var_name is not None:
            result, source = self.lookup(env_var_name)
        else:
            result, source = None, None

        if result is None and default is not None:
            result, source = default, "default"

        if result is None:
            if required:
                where = f" (checked {env_var_name})" if env_var_name else ""
                raise CredentialNotFoundError(f"Required setting not found{where}", env_var_name=env_var_name)
            return None

        logger.debug(f"Resolved setting from {source}: {_shown(result, mask_in_logs)}")
        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file, stripping surrounding whitespace.

        The path is ``file_path`` or the value of ``env_var_name``; ``~`` and
        ``$VAR`` in it are expanded.

        Raises:
            CredentialFileError: If required and there is no path or the file
                cannot be read.
        """
        if file_path is None and env_var_name is not None:
            file_path = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if file_path is None:
            if required:
                hint = f" ({env_var_name} is not set)" if env_var_name else ""
                raise CredentialFileError(f"No secret file path given{hint}")
            return None

        path = Path(os.path.expandvars(str(file_path))).expanduser()

        try:
            secret = path.read_text().strip()
        except FileNotFoundError as e:
            return self._unreadable(f"Secret file not found: {path}", e, required)
        except PermissionError as e:
            return self._unreadable(f"Permission denied reading secret file: {path}", e, required)
        except OSError as e:
            return self._unreadable(f"Cannot read secret file {path}: {e}", e, required)

        logger.debug(f"Resolved secret from file {path}: {MASK}")
        return secret

    @staticmethod
    def _unreadable(message: str, error: OSError, required: bool) -> None:
        if required:
            raise CredentialFileError(message) from error
        if isinstance(error, FileNotFoundError):
            logger.debug(message)
        else:
            logger.warning(message)
        return None

    def resolve_secret(self, env_var_name: str, file_env_var_name: str, required: bool = False) -> str | None:
        """Resolve a secret given directly or through a file.

        ``env_var_name`` wins over the file named by ``file_env_var_name``.

        Raises:
            CredentialNotFoundError: If required and neither source has it;
                the error names ``env_var_name``.
        """
        secret = self.resolve(env_var_name=env_var_name)
        if secret is None:
            secret = self.resolve_from_file(env_var_name=file_env_var_name)
        if secret is None and required:
            raise CredentialNotFoundError(
                f"Required secret not found (checked {env_var_name} and {file_env_var_name})",
                env_var_name=env_var_name,
            )
        return secret
