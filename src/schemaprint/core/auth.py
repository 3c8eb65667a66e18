"""Databricks workspace access for the Unity Catalog snapshot source.

Credentials come from Databricks unified authentication (a profile in
~/.databrickscfg or DATABRICKS_* environment variables). The resolved host
is normalized here because it ends up verbatim in the snapshot's server line.
"""

from urllib.parse import urlsplit

from databricks.sdk import WorkspaceClient
from databricks.sdk.core import Config


class AuthError(RuntimeError):
    """Raised when no usable Databricks credentials can be resolved."""


def _login_command(profile: str | None) -> str:
    cmd = "databricks auth login"
    return f"{cmd} --profile {profile}" if profile else cmd


def _format_auth_error(message: str, profile: str | None) -> str:
    """Return a user-facing message naming the profile that failed."""
    source = f"profile '{profile}'" if profile else "the default Databricks configuration"
    text = f"Cannot read Unity Catalog with {source}: {message}"
    if "auth login" in message or "refresh token" in message:
        text += f"\nRe-authenticate with:\n  $ {_login_command(profile)}"
    return text


def normalize_host(host: str | None) -> str | None:
    """
    Reduce a workspace URL to `scheme://netloc`.

    Browser URLs often carry `?o=<workspace-id>`, fragments or a trailing
    path; a bare hostname gets `https://`.
    """
    if not host:
        return host
    if "://" not in host:
        host = f"https://{host}"
    parts = urlsplit(host)
    return f"{parts.scheme}://{parts.netloc}"


def get_client(profile: str | None = None) -> WorkspaceClient:
    """Create a WorkspaceClient for `profile` (or the default configuration)."""
    try:
        cfg = Config(profile=profile) if profile else Config()
    except ValueError as exc:
        raise AuthError(_format_auth_error(str(exc), profile)) from exc
    cfg.host = normalize_host(cfg.host)
    return WorkspaceClient(config=cfg)
