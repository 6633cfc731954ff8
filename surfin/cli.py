"""CLI entry point for the surf forecast renderer."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from surfin.config.loader import ConfigError, get_config_value, load_config
from surfin.ingest.forecast_parser import ForecastParseError, load_forecasts
from surfin.ingest.msw_client import MswClientError
from surfin.ingest.spot_crawler import SpotCrawlError, SpotCrawler
from surfin.ingest.spots import Spots, SpotsError
from surfin.pipeline.spot_forecast import SpotForecastPipeline, SpotNotFoundError
from surfin.ui.errors import RenderError
from surfin.ui.render import Output, render, render_forecast
from surfin.ui.spots_view import draw_spots

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="surfin",
        description="Marine forecasts rendered for the terminal or browser",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # render a saved forecast
    render_p = sub.add_parser("render", help="Render an MSW forecast JSON file")
    render_p.add_argument("file", help="Forecast JSON path")
    render_p.add_argument("--html", action="store_true", help="Emit an HTML page")
    render_p.add_argument("-o", "--output", default=None, help="Write to a file instead of stdout")

    # fetch and render a live forecast
    forecast_p = sub.add_parser("forecast", help="Fetch and render a spot forecast")
    forecast_p.add_argument("spot", help="Spot name (e.g. ormond-beach) or MSW spot id")
    forecast_p.add_argument("--html", action="store_true", help="Emit an HTML page")

    # spots, optionally rebuilt from the MSW site map
    spots_p = sub.add_parser("spots", help="List known spots and their ids")
    spots_p.add_argument(
        "-u", "--update", action="store_true",
        help="Crawl the MSW site map and rewrite the spot mapping",
    )
    spots_p.add_argument(
        "-p", "--path", default=None,
        help="Where --update writes the mapping (default: spots_path)",
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. layout.viewport_width")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, ConfigError, ValidationError) as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1

    if args.command == "render":
        return _cmd_render(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "spots":
        return _cmd_spots(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _output(args) -> Output:
    return Output.HTML if args.html else Output.TERMINAL


def _cmd_render(config, args) -> int:
    try:
        forecast = load_forecasts(args.file)
        rendered = render_forecast(forecast, _output(args), config.layout.to_layout())
    except (OSError, ForecastParseError, RenderError) as e:
        logger.error("Couldn't render %s: %s", args.file, e)
        return 1

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(rendered.body)
        print(f"Wrote {rendered.output} forecast to {args.output}")
    else:
        sys.stdout.write(rendered.body)
    return 0


def _cmd_forecast(config, args) -> int:
    pipeline = SpotForecastPipeline(config)
    try:
        rendered = pipeline.run(args.spot, _output(args))
    except SpotNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (SpotsError, MswClientError, ForecastParseError, RenderError) as e:
        logger.error("Couldn't build forecast for %s: %s", args.spot, e)
        return 1
    sys.stdout.write(rendered.body)
    return 0


def _cmd_spots(config, args) -> int:
    if args.path and not args.update:
        print("Error: --path requires --update", file=sys.stderr)
        return 1
    if args.update:
        return _update_spots(config, args.path or config.spots_path)

    try:
        spots = Spots.from_path(config.spots_path)
    except SpotsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(render(draw_spots(spots.items(), config.layout.to_layout())).body)
    return 0


def _update_spots(config, path) -> int:
    try:
        spots = SpotCrawler.from_config(config.msw).crawl()
    except (SpotCrawlError, SpotsError) as e:
        logger.error("Couldn't crawl spots: %s", e)
        return 1
    if not len(spots):
        logger.error("Site map had no spot links; leaving %s untouched", path)
        return 1
    try:
        spots.write(path)
    except OSError as e:
        logger.error("Couldn't write spots to %s: %s", path, e)
        return 1
    print(f"Wrote {len(spots)} spots to {path}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        print("Use: config show | config get key")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from surfin.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
