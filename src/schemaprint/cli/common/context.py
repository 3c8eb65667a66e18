"""Snapshot-source construction for CLI commands."""

from schemaprint.cli.common.exits import exit_from_exc
from schemaprint.core.adapters.unitycatalog import UnityCatalogAdapter
from schemaprint.core.auth import AuthError, get_client


def build_uc_adapter(profile: str | None) -> UnityCatalogAdapter:
    """Return a Unity Catalog adapter for `profile`, exiting 1 on auth failure."""
    try:
        client = get_client(profile)
    except AuthError as exc:
        exit_from_exc(exc, message=str(exc), code=1)
    return UnityCatalogAdapter(client)
