"""
Command line entry point for Template Scout.

    template-scout                       # one discovery pass, writes template-analysis.json
    template-scout discover               # same as above
    template-scout serve --port 8000     # REST API (see TemplateScout.Routes.TemplateRoute)

Discovery takes no flags; it is configured through GITHUB_TOKEN, MAX_TEMPLATES
and MIN_STARS (a .env file in the working directory is read first).
"""

import argparse
import logging
import sys
from typing import List, Optional

from TemplateScout.Utility.env import load_env_file
from TemplateScout.Utility.config import DiscoveryConfig
from TemplateScout.Business.DiscoveryBusiness import DiscoveryBusiness, write_snapshot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="template-scout",
        description="Discover Next.js template repositories on GitHub",
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("discover", help="Search GitHub and write the snapshot file (default)")

    serve = commands.add_parser("serve", help="Run the REST API")
    serve.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, default=5000, help="Port to listen on (default: 5000)")
    serve.add_argument("--debug", action="store_true", help="Run Flask in debug mode")
    return parser


def bootstrap() -> DiscoveryConfig:
    logging.basicConfig(level=logging.INFO)
    load_env_file()
    return DiscoveryConfig.from_env()


def run_discovery(config: DiscoveryConfig) -> int:
    try:
        templates = DiscoveryBusiness(config).DiscoverTemplates()
        write_snapshot(templates, config.output_path)
    except Exception:
        logger.exception("Template discovery failed")
        return 1
    return 0


def run_server(config: DiscoveryConfig, host: str, port: int, debug: bool) -> int:
    # imported here so discovery runs do not need Flask loaded
    from TemplateScout.Routes.TemplateRoute import CreateApp

    app = CreateApp({"DISCOVERY_CONFIG": config})
    logger.info("Serving Template Scout API on http://%s:%d (snapshot: %s)", host, port, config.output_path)
    app.run(host=host, port=port, debug=debug, use_reloader=debug)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = bootstrap()
    if args.command == "serve":
        code = run_server(config, args.host, args.port, args.debug)
    else:
        code = run_discovery(config)
    sys.exit(code)


if __name__ == "__main__":
    main()
