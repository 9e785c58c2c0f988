# coolify_client/normalizers/traefik.py
"""Flatten the Traefik ``/api/rawdata`` keyed maps into lists."""

from typing import Any, Dict, List

from coolify_client.core.schemas import TraefikRouter, TraefikService, TraefikSnapshot


# Provider Traefik assigns to its own generated configuration
INTERNAL_PROVIDER = "internal"


def flatten_keyed_map(entries: Any) -> List[Dict[str, Any]]:
    """
    Turn ``{"name@provider": {...}}`` into ``[{"name": "name@provider", ...}]``.

    Source order is kept; entries from the internal provider are dropped.
    """
    if not isinstance(entries, dict):
        return []

    flattened = []
    for key, value in entries.items():
        record = {"name": key, **(value or {})}
        if record.get("provider") == INTERNAL_PROVIDER:
            continue
        flattened.append(record)
    return flattened


def normalize_traefik_snapshot(raw: Any) -> TraefikSnapshot:
    """Build a snapshot from a decoded rawdata payload."""
    if not isinstance(raw, dict):
        return TraefikSnapshot()

    return TraefikSnapshot(
        routers=[
            TraefikRouter.model_validate(record)
            for record in flatten_keyed_map(raw.get("routers"))
        ],
        services=[
            TraefikService.model_validate(record)
            for record in flatten_keyed_map(raw.get("services"))
        ],
    )
