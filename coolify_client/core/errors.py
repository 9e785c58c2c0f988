# coolify_client/core/errors.py

# -----------------------------
# Base Errors
# -----------------------------

class CoolifyError(Exception):
    """Base class for all client errors."""
    pass


# -----------------------------
# Configuration Errors
# -----------------------------

class ConfigurationError(CoolifyError):
    """Required credential missing or malformed."""
    pass


# -----------------------------
# HTTP Errors
# -----------------------------

class ApiError(CoolifyError):
    """Non-2xx response from the Coolify API.

    The message format ``API <status>: <body>`` is relied upon by callers.
    """

    prefix = "API"

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"{self.prefix} {status}: {body}")


class TraefikApiError(ApiError):
    """Non-2xx response from the Traefik dashboard API."""

    prefix = "Traefik API"
