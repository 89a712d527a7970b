#!/usr/bin/env python3
"""
Command-line interface for the design token pipeline.

    design-tokens validate --brand acme
    design-tokens flatten --brand acme --format tokens-studio
    design-tokens build --brand acme --output dist/tokens
    design-tokens list

Unset flags fall back to BRAND, TOKENS_BRANDS_DIR, TOKENS_OUTPUT_DIR and
TOKENS_FORMAT. Exits with status 1 on any fatal error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from chuk_mcp_design_tokens.builder import TokenBuilder
from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.constants import InputFormat, SuccessMessages
from chuk_mcp_design_tokens.errors import DesignTokenError
from chuk_mcp_design_tokens.storage import TokenDocumentLoader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="design-tokens",
        description="Normalize design-token exports and generate CSS, Tailwind and JS/TS artifacts",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("validate", "Validate a token source"),
        ("flatten", "Write the flattened token table"),
        ("build", "Generate every artifact"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--brand", help="Brand name (reads <brand>-tokens.json)")
        sub.add_argument("--source", type=Path, help="Source file (overrides --brand)")
        sub.add_argument(
            "--format",
            dest="input_format",
            choices=[f.value for f in InputFormat],
            help="Source schema (default: figma)",
        )
        sub.add_argument("--brands-dir", type=Path, help="Directory of brand sources")
        sub.add_argument("--theme", help="Theme name for tokens-studio sources (default: brand)")
        if name != "validate":
            sub.add_argument("--output", dest="output_dir", type=Path, help="Output root")

    sub = subparsers.add_parser("list", help="List brands with a token source")
    sub.add_argument("--brands-dir", type=Path, help="Directory of brand sources")

    return parser


def _report_failure(error: DesignTokenError) -> int:
    location = f" ({error.location})" if error.location else ""
    print(f"Error: {error.message}{location}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validation warnings reach stderr through the warning log records
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        config = BuildConfig.from_env(
            brand=getattr(args, "brand", None),
            source=getattr(args, "source", None),
            input_format=getattr(args, "input_format", None),
            brands_dir=args.brands_dir,
            output_dir=getattr(args, "output_dir", None),
            theme=getattr(args, "theme", None),
        )
        if args.command == "list":
            for brand in TokenDocumentLoader(config.brands_dir).list_brands():
                print(brand)
            return 0
        config.source_path()
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    builder = TokenBuilder(config)

    if args.command == "validate":
        result = builder.validate()
        if result.error is not None:
            return _report_failure(result.error)
        print(SuccessMessages.TOKENS_VALID.format(themes=len(result.theme_names)))
    elif args.command == "flatten":
        result = builder.flatten()
        if result.error is not None:
            return _report_failure(result.error)
        print(
            SuccessMessages.TOKENS_FLATTENED.format(
                format=config.input_format.value, path=result.written[0]
            )
        )
    else:
        result = builder.build()
        if result.error is not None:
            return _report_failure(result.error)
        print(
            SuccessMessages.TOKENS_BUILT.format(
                artifacts=len(result.written),
                themes=len(result.theme_names),
                path=config.output_dir,
            )
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
