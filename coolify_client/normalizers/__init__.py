"""Pure response-shape normalizers."""

from .deployment_logs import NO_LOGS, parse_deployment_logs
from .responses import (
    as_list,
    merge_environment_databases,
    normalize_application_logs,
    unwrap_deployments,
)
from .traefik import INTERNAL_PROVIDER, flatten_keyed_map, normalize_traefik_snapshot


__all__ = [
    "NO_LOGS",
    "INTERNAL_PROVIDER",
    "as_list",
    "flatten_keyed_map",
    "merge_environment_databases",
    "normalize_application_logs",
    "normalize_traefik_snapshot",
    "parse_deployment_logs",
    "unwrap_deployments",
]
