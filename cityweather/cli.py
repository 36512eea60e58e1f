"""CLI entry point for city weather lookups."""

import argparse
import logging

from cityweather.config.loader import load_config, override_config
from cityweather.config.schema import AppConfig, OutputFormat
from cityweather.errors import WeatherError
from cityweather.pipeline.aggregator import WeatherAggregator
from cityweather.reporting.formatters import (
    format_error,
    format_report_html,
    format_report_json,
    format_report_text,
)

logger = logging.getLogger(__name__)

FORMATTERS = {
    OutputFormat.TEXT: format_report_text,
    OutputFormat.JSON: format_report_json,
    OutputFormat.HTML: format_report_html,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cityweather",
        description="Current weather and short-range forecast for a city",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Look up weather for a city")
    weather_p.add_argument("city", nargs="+", help="City name")
    weather_p.add_argument(
        "--format", choices=[f.value for f in OutputFormat], default=None,
        help="Output format",
    )
    weather_p.add_argument(
        "--timeout-ms", type=int, default=None, help="Per-request timeout"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_weather(config: AppConfig, args) -> int:
    try:
        config = override_config(
            config, output__format=args.format, api__timeout_ms=args.timeout_ms
        )
    except ValueError as e:
        print(format_error(str(e)))
        return 1

    aggregator = WeatherAggregator.from_config(config)
    try:
        report = aggregator.get_weather(" ".join(args.city))
    except WeatherError as e:
        logger.debug("Lookup failed: %s", type(e).__name__)
        print(format_error(e.message))
        return 1

    print(FORMATTERS[config.output.format](report))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
