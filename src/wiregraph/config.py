from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wiregraph.exceptions import WiregraphConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_RESOURCE = "server_properties.json"


class HttpServerConfig(BaseModel):
    """Network settings of the HTTP server."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    port: int = Field(ge=0, le=65535)
    host: str = "127.0.0.1"


class ServerProperties(BaseModel):
    """Root configuration value registered into the container before the server."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    http: HttpServerConfig


def load_server_config(
    resource: str = DEFAULT_CONFIG_RESOURCE,
    *,
    path: str | Path | None = None,
) -> ServerProperties:
    """Load and validate the server configuration.

    The packaged ``wiregraph.resources`` file named ``resource`` is read unless
    an explicit ``path`` is given.

    Args:
        resource: File name inside the ``wiregraph.resources`` package.
        path: Optional filesystem path that replaces the packaged resource.

    Raises:
        WiregraphConfigurationError: If the file is missing, is not UTF-8 encoded
            JSON or does not match the ``ServerProperties`` schema.

    """
    if path is not None:
        source = str(path)
        try:
            payload = Path(path).read_bytes()
        except OSError as error:
            msg = f"Server properties file not found: {source}"
            raise WiregraphConfigurationError(msg) from error
    else:
        source = f"wiregraph.resources/{resource}"
        try:
            payload = resources.files("wiregraph.resources").joinpath(resource).read_bytes()
        except (FileNotFoundError, ModuleNotFoundError) as error:
            msg = f"Server properties resource not found: {source}"
            raise WiregraphConfigurationError(msg) from error

    try:
        properties = ServerProperties.model_validate_json(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValidationError) as error:
        msg = f"Failed to load server properties from {source}: {error}"
        raise WiregraphConfigurationError(msg) from error

    logger.debug("Loaded server properties from %s", source)
    return properties


__all__ = [
    "DEFAULT_CONFIG_RESOURCE",
    "HttpServerConfig",
    "ServerProperties",
    "load_server_config",
]
