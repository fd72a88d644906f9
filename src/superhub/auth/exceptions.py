"""Configuration errors raised before any request is sent."""

from superhub.errors.exceptions import SuperhubError


class CredentialError(SuperhubError):
    """A setting or secret is missing or unusable.

    Raised directly for values that are present but invalid, e.g. a
    persistent token id that is not a UUID.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """No source provides a required setting.

    Attributes:
        env_var_name: Variable that was looked up, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A secret file is not configured or cannot be read."""

    pass
