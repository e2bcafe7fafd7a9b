"""Entry point for timeline-tui."""

import argparse
import sys
from pathlib import Path

from .config import ConfigError, DEFAULT_CONFIG_PATH, LOG_LEVELS, TimelineConfig, load_config

DEMO_CONVERSATION = Path(__file__).parent / "fixtures" / "mock_conversation.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timeline-tui",
        description="View an agent conversation log as a timeline.",
    )
    parser.add_argument("conversation", nargs="?", help="Conversation JSON file")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--demo", action="store_true", help="Show the bundled sample conversation")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Log level")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--no-watch", action="store_true", help="Do not reload on file changes")
    parser.add_argument("--expand-tools", action="store_true", help="Open all tool calls")
    return parser


def build_config(args: argparse.Namespace) -> TimelineConfig:
    """Load the config file and apply command-line overrides.

    Raises:
        ConfigError: If the config file is invalid.
    """
    config = load_config(args.config)
    if args.demo:
        config.conversation = str(DEMO_CONVERSATION)
    elif args.conversation:
        config.conversation = args.conversation
    if args.log_level:
        config.log_level = args.log_level
    if args.log_file:
        config.log_file = args.log_file
    if args.no_watch:
        config.watch = False
    if args.expand_tools:
        config.expand_tool_calls = True
    return config


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    from . import logging_setup
    from .app import TimelineApp

    logging_setup.init(log_level=config.log_level, log_file=config.log_file)

    app = TimelineApp(config)
    app.run()


if __name__ == "__main__":
    main()
