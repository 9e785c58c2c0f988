"""Pydantic schemas for Coolify and Traefik payloads."""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


def _none_as_empty_dict(value: Any) -> Any:
    return {} if value is None else value


def _none_as_empty_text(value: Any) -> Any:
    return "" if value is None else value


def _none_as_false(value: Any) -> Any:
    return False if value is None else value


# ============================================
# Base Schema
# ============================================

class Record(BaseModel):
    """Immutable upstream record; unknown fields are kept."""

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
    )


# ============================================
# Applications / Services / Databases
# ============================================

class Application(Record):
    """Application resource."""

    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    description: Optional[str] = None
    fqdn: Optional[str] = None
    status: str = ""
    git_repository: Optional[str] = None
    git_branch: Optional[str] = None
    build_pack: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("uuid", "name", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)


class Service(Record):
    """One-click service resource."""

    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    description: Optional[str] = None
    service_type: Optional[str] = None
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("uuid", "name", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)


class ServiceApplication(Record):
    uuid: str = ""
    name: str = ""
    status: str = ""
    image: Optional[str] = None
    fqdn: Optional[str] = None
    ports: Optional[str] = None
    last_online_at: Optional[datetime] = None

    @field_validator("uuid", "name", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)


class ServiceDatabase(Record):
    uuid: str = ""
    name: str = ""
    status: str = ""
    image: Optional[str] = None
    last_online_at: Optional[datetime] = None

    @field_validator("uuid", "name", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)


class ServiceDetail(Service):
    """Service with its component containers."""

    applications: List[ServiceApplication] = Field(default_factory=list)
    databases: List[ServiceDatabase] = Field(default_factory=list)

    @field_validator("applications", "databases", mode="before")
    @classmethod
    def empty_collections(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class Database(Record):
    """Standalone database resource."""

    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    description: Optional[str] = None
    type: Optional[str] = None
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("uuid", "name", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)


class DatabaseDetail(Database):
    image: Optional[str] = None
    is_public: bool = False
    public_port: Optional[int] = None
    internal_db_url: Optional[str] = None
    external_db_url: Optional[str] = None
    limits_memory: Optional[str] = None
    limits_cpus: Optional[str] = None

    @field_validator("is_public", mode="before")
    @classmethod
    def false_flags(cls, value: Any) -> Any:
        return _none_as_false(value)


# ============================================
# Projects / Environments
# ============================================

class Environment(Record):
    """Named grouping of resources within a project."""

    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    project_id: Optional[int] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    applications: List[Application] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)
    databases: List[Database] = Field(default_factory=list)

    @field_validator("applications", "services", "databases", mode="before")
    @classmethod
    def empty_collections(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class Project(Record):
    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    description: Optional[str] = None
    environments: List[Environment] = Field(default_factory=list)

    @field_validator("environments", mode="before")
    @classmethod
    def empty_collections(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


# ============================================
# Servers
# ============================================

class ServerProxy(Record):
    type: Optional[str] = None
    status: Optional[str] = None


class ServerSettings(Record):
    is_reachable: Optional[bool] = None
    is_usable: Optional[bool] = None


class Server(Record):
    """Host managed by Coolify."""

    id: Optional[int] = None
    uuid: str = ""
    name: str = ""
    description: Optional[str] = None
    ip: str = ""
    user: Optional[str] = None
    port: Optional[int] = None
    proxy: ServerProxy = Field(default_factory=ServerProxy)
    settings: ServerSettings = Field(default_factory=ServerSettings)

    @field_validator("uuid", "name", "ip", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)

    @field_validator("proxy", "settings", mode="before")
    @classmethod
    def empty_sections(cls, value: Any) -> Any:
        return _none_as_empty_dict(value)


# ============================================
# Deployments
# ============================================

class Deployment(Record):
    """Single build/release execution of an application.

    ``logs`` holds a serialized JSON array of log entries, plain text, or
    nothing; see ``parse_deployment_logs``.
    """

    id: Optional[int] = None
    application_id: Optional[str] = None
    deployment_uuid: str = ""
    pull_request_id: Optional[int] = 0
    force_rebuild: bool = False
    commit: Optional[str] = None
    commit_message: Optional[str] = None
    status: str = ""
    is_webhook: bool = False
    is_api: bool = False
    logs: Optional[str] = None
    current_process_id: Optional[str] = None
    restart_only: bool = False
    rollback: bool = False
    git_type: Optional[str] = None
    server_id: Optional[int] = None
    server_name: Optional[str] = None
    application_name: Optional[str] = None
    deployment_url: Optional[str] = None
    destination_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("application_id", "destination_id", "current_process_id", mode="before")
    @classmethod
    def coerce_identifier(cls, value: Any) -> Any:
        # Coolify sends these as ints on some versions
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("logs", mode="before")
    @classmethod
    def serialize_log_entries(cls, value: Any) -> Any:
        if isinstance(value, list):
            return json.dumps(value)
        return value

    @field_validator("deployment_uuid", "status", mode="before")
    @classmethod
    def empty_text(cls, value: Any) -> Any:
        return _none_as_empty_text(value)

    @field_validator("force_rebuild", "is_webhook", "is_api", "restart_only", "rollback", mode="before")
    @classmethod
    def false_flags(cls, value: Any) -> Any:
        return _none_as_false(value)


# ============================================
# Traefik
# ============================================

class TraefikTLS(Record):
    cert_resolver: Optional[str] = Field(default=None, alias="certResolver")


class TraefikRouter(Record):
    """HTTP router from the Traefik dashboard, keyed ``name@provider``."""

    name: str
    entry_points: List[str] = Field(default_factory=list, alias="entryPoints")
    service: str = ""
    rule: str = ""
    status: str = ""
    provider: str = ""
    middlewares: List[str] = Field(default_factory=list)
    tls: Optional[TraefikTLS] = None

    @field_validator("entry_points", "middlewares", mode="before")
    @classmethod
    def empty_collections(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class TraefikBackend(Record):
    url: str = ""


class TraefikLoadBalancer(Record):
    servers: List[TraefikBackend] = Field(default_factory=list)

    @field_validator("servers", mode="before")
    @classmethod
    def empty_collections(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class TraefikService(Record):
    """HTTP service (backend pool) from the Traefik dashboard."""

    name: str
    status: str = ""
    provider: str = ""
    type: Optional[str] = None
    load_balancer: Optional[TraefikLoadBalancer] = Field(default=None, alias="loadBalancer")
    server_status: Dict[str, str] = Field(default_factory=dict, alias="serverStatus")
    used_by: List[str] = Field(default_factory=list, alias="usedBy")

    @field_validator("server_status", mode="before")
    @classmethod
    def empty_status(cls, value: Any) -> Any:
        return _none_as_empty_dict(value)

    @field_validator("used_by", mode="before")
    @classmethod
    def empty_used_by(cls, value: Any) -> Any:
        return _none_as_empty_list(value)

    @property
    def backends(self) -> List[TraefikBackend]:
        if self.load_balancer is None:
            return []
        return list(self.load_balancer.servers)


class TraefikSnapshot(Record):
    """Point-in-time dump of routers and services."""

    routers: List[TraefikRouter] = Field(default_factory=list)
    services: List[TraefikService] = Field(default_factory=list)
