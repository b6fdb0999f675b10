"""
Postboard Entry Point

Usage:
    python -m postboard                  # Run web server
    python -m postboard config --show    # Print effective configuration
    python -m postboard --help           # Show help
"""

import argparse
import sys
import logging
import logging.handlers
from pathlib import Path

from . import __version__


def setup_logging(
    level: str,
    log_file: str | None = None,
    max_size_mb: int = 10,
    backup_count: int = 3
):
    """Configure logging for the application."""
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count
        ))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        handlers=handlers,
        force=True
    )


def run_config(args, config) -> int:
    """Handle the config subcommand. Returns process exit code."""
    from .config import create_default_config

    if args.init:
        if args.config.exists():
            print(f"Refusing to overwrite existing {args.config}", file=sys.stderr)
            return 1
        create_default_config(args.config)
        print(f"Wrote default configuration to {args.config}")
        return 0

    if args.validate:
        errors = config.validate()
        for error in errors:
            print(f"error: {error}", file=sys.stderr)
        if errors:
            return 1
        print("Configuration OK")
        return 0

    print(config.dumps(), end="")
    return 0


def main():
    """Main entry point for Postboard."""
    parser = argparse.ArgumentParser(
        prog="postboard",
        description="Postboard - Minimal Password-Protected Bulletin Board"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"Postboard {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=Path("config.toml"),
        help="Path to configuration file (default: config.toml)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from config, else INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    config_parser = subparsers.add_parser("config", help="Configuration interface")
    config_group = config_parser.add_mutually_exclusive_group()
    config_group.add_argument("--show", action="store_true", help="Show current config (default)")
    config_group.add_argument("--validate", action="store_true", help="Validate config")
    config_group.add_argument("--init", action="store_true", help="Write a default config file")

    args = parser.parse_args()

    from .config import load_config

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        # TypeError: unknown key in a config section
        print(f"Cannot load {args.config}: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        args.log_level or config.logging.level,
        config.logging.file or None,
        config.logging.max_size_mb,
        config.logging.backup_count
    )
    logger = logging.getLogger("postboard")

    if args.command == "config":
        sys.exit(run_config(args, config))

    # Default: run web server
    from .errors import StorageFailure
    from .web.app import build_service, create_app

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Invalid configuration: {error}")
        sys.exit(1)

    try:
        service = build_service(config)
    except StorageFailure as e:
        logger.error(f"Fatal error: cannot open database {config.database.path}: {e.__cause__ or e}")
        sys.exit(1)

    db = service.repo.db
    try:
        app = create_app(config, service)
        logger.info(
            f"Starting Postboard v{__version__} on {config.web.host}:{config.web.port} "
            f"({db.count_posts()} posts)"
        )
        app.run(host=config.web.host, port=config.web.port, debug=config.web.debug)
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
    finally:
        db.close()


if __name__ == "__main__":
    main()
