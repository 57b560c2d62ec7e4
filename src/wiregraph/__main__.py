from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from wiregraph.config import load_server_config
from wiregraph.container import Container
from wiregraph.server import Server

CONFIG_BINDING_NAME = "config"


def build_container(config_path: str | Path | None = None) -> Container:
    """Compose the application container.

    Registers the loaded configuration as an instance named ``"config"`` and the
    ``Server`` type. Nothing is constructed until ``Server`` is resolved.

    Args:
        config_path: Optional configuration file replacing the packaged resource.

    """
    container = Container()
    container.register_instance(load_server_config(path=config_path), CONFIG_BINDING_NAME)
    container.register_type(Server)
    return container


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wiregraph", description="Run the wiregraph server.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a server properties JSON file (defaults to the packaged one).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Root logging level.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the server from the command line.

    Configures root logging, composes the container, resolves ``Server`` and
    serves it until interrupted.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Returns:
        Process exit code.

    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = build_container(args.config)
    server = container.resolve(Server)
    server.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
