"""CLI for typomd - parse and render markdown returned by language models."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import OUTPUT_FORMATS
from .runtime import build_runtime

logger = logging.getLogger("typomd.cli")


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, out: str | None) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Dump blocks and inline spans."""
    doc = rt.parser.parse(_read_input(args.input))
    _write_output(rt.output(doc, args.format), args.out)
    return 0


def cmd_render(args: argparse.Namespace, rt: Any) -> int:
    """Render to HTML or plain text."""
    doc = rt.parser.parse(_read_input(args.input))
    _write_output(rt.output(doc, args.format), args.out)
    return 0


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start local JSON API server."""
    try:
        import uvicorn

        from .api.app import create_app, generate_token
    except ImportError as e:
        print(
            "Error: API dependencies not installed. "
            "Install with: pip install typomd[api]",
            file=sys.stderr
        )
        print(f"Details: {e}", file=sys.stderr)
        return 1

    token_arg = args.token
    if token_arg == "auto":
        token = generate_token()
        print(f"Generated bearer token: {token}")
        print(f"Use in requests: Authorization: Bearer {token}")
    elif token_arg == "none":
        print("Warning: Running without authentication. Only use in trusted environments.")
        token = None
    else:
        token = token_arg

    server = rt.config.server
    host = args.host or server.host
    port = args.port or server.port
    app = create_app(rt, token=token, enable_cors=args.cors or server.cors)

    print(f"Starting server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="debug" if args.verbose else "info")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typomd",
        description="Parse and render markdown returned by language models",
    )
    parser.add_argument("--config", type=Path, help="Path to typomd.toml")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # parse command
    parser_parse = subparsers.add_parser("parse", help="Dump blocks and spans")
    parser_parse.add_argument("input", help="Markdown file, or - for stdin")
    parser_parse.add_argument(
        "--format", choices=["json", "yaml"], default="json",
        help="Serialization (default: json)"
    )
    parser_parse.add_argument("--out", "-o", help="Write to file instead of stdout")

    # render command
    parser_render = subparsers.add_parser("render", help="Render to html or text")
    parser_render.add_argument("input", help="Markdown file, or - for stdin")
    parser_render.add_argument(
        "--format", choices=list(OUTPUT_FORMATS), default=None,
        help="Output format (default: render.format from config)"
    )
    parser_render.add_argument("--out", "-o", help="Write to file instead of stdout")

    # serve command
    parser_serve = subparsers.add_parser("serve", help="Start local JSON API")
    parser_serve.add_argument("--host", default=None, help="Bind address (default: from config)")
    parser_serve.add_argument("--port", type=int, default=None, help="Port (default: from config)")
    parser_serve.add_argument(
        "--token", default="auto",
        help="Bearer token: 'auto' to generate, 'none' to disable, or a literal token"
    )
    parser_serve.add_argument("--cors", action="store_true", help="Enable CORS")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    handlers = {
        "parse": cmd_parse,
        "render": cmd_render,
        "serve": cmd_serve,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        rt = build_runtime(config_path=args.config)
        exit_code = handler(args, rt)
    except Exception as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
