"""Server composition: configuration instance plus a container-built server.

The packaged ``server_properties.json`` is loaded into a ``ServerProperties``
value and registered under the name ``"config"``. ``Server`` takes a parameter
named ``config``, so resolving it receives exactly that instance.
"""

from __future__ import annotations

from wiregraph.__main__ import CONFIG_BINDING_NAME, build_container
from wiregraph.config import ServerProperties
from wiregraph.server import Server


def main() -> None:
    container = build_container()
    server = container.resolve(Server)

    print(f"port={server.config.http.port}")  # => port=8080

    registered = container.resolve(ServerProperties, CONFIG_BINDING_NAME)
    print(f"same_config={server.config is registered}")  # => same_config=True

    health_route = any(getattr(route, "path", None) == "/health" for route in server.app.routes)
    print(f"health_route={health_route}")  # => health_route=True


if __name__ == "__main__":
    main()
