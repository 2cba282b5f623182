"""Local launcher: play in the terminal or serve the HTTP API."""

import argparse
import sys

import uvicorn

from infra.logger import configure_logging, get_logger


def _console(args: argparse.Namespace) -> None:
    from console import run_console
    from paintball import Scenario

    game = None
    if args.scenario:
        game = Scenario.load_json(args.scenario).create_game()
    run_console(game)


def _serve(args: argparse.Namespace) -> None:
    log = get_logger(__name__)
    url = f"http://{args.host}:{args.port}"

    log.info("Starting paintball API at %s", url)
    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a paintball grid match.")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument("--plain-logs", action="store_true", help="Log plain text instead of JSON lines")
    sub = parser.add_subparsers(dest="command")

    console = sub.add_parser("console", help="Play from the terminal")
    console.add_argument("--scenario", help="Scenario JSON to start the match from")
    console.set_defaults(func=_console)

    serve = sub.add_parser("serve", help="Serve the HTTP API")
    serve.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Port for the API (default: 8000)")
    serve.add_argument(
        "--reload",
        dest="reload",
        action="store_true",
        default=False,
        help="Enable auto-reload for development",
    )
    serve.set_defaults(func=_serve)
    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(list(argv) + ["console"])

    # Keep stderr free for the prompt when playing in the terminal.
    configure_logging(level=args.log_level, json=not args.plain_logs, console=args.command != "console")
    args.func(args)


if __name__ == "__main__":
    main()
