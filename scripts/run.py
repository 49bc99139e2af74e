#!/usr/bin/env python
"""CLI for the script diff service."""

import argparse
import json
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from script_diff import diff_script, load_config
from script_diff.core import ConfigError
from script_diff.utils import setup_logging


def _read_text(inline: str | None, path: str | None) -> str | None:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return inline


def cmd_diff(args, config):
    """Diff a transcription against an original script."""
    if args.original is None and not args.original_file:
        print("✗ Error: provide ORIGINAL or --original-file", file=sys.stderr)
        return 2

    try:
        original = _read_text(args.original, args.original_file)
        transcription = _read_text(args.transcription, args.transcription_file)
    except OSError as e:
        print(f"✗ Error: cannot read input: {e}", file=sys.stderr)
        return 1

    words = diff_script(original, transcription)

    if args.json:
        print(json.dumps([w.to_dict() for w in words], ensure_ascii=False))
        return 0

    matched = sum(1 for w in words if w.matched)
    for w in words:
        print(f"  {'+' if w.matched else '-'} {w.word}")
    print("-" * 50)
    print(f"Matched: {matched}/{len(words)}")
    return 0


def cmd_serve(args, config):
    """Run the HTTP API."""
    import uvicorn

    from script_diff.api.app import create_app

    api_config = config.api.model_copy(
        update={
            "host": args.host or config.api.host,
            "port": args.port or config.api.port,
        }
    )
    app = create_app(api_config)
    uvicorn.run(app, host=api_config.host, port=api_config.port, log_config=None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Script Diff - mark which script words a transcript reproduced",
    )
    parser.add_argument("--env", "-e", default=None, help="Environment")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--config", help="Explicit config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override configured log level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Diff
    p = subparsers.add_parser("diff", help="Diff a transcription against a script")
    p.add_argument("original", nargs="?", help="Original script text")
    p.add_argument("transcription", nargs="?", default=None, help="Transcribed text")
    p.add_argument("--original-file", help="Read original script from file")
    p.add_argument("--transcription-file", help="Read transcription from file")
    p.add_argument("--json", action="store_true", help="Print JSON instead of a word list")
    p.set_defaults(func=cmd_diff)

    # Serve
    p = subparsers.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", help="Bind host")
    p.add_argument("--port", "-p", type=int, help="Bind port")
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(config_path=args.config, env=args.env, config_dir=args.config_dir)
    except ConfigError as e:
        print(f"✗ Config error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.log_level, config.log_format)
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
