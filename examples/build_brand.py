#!/usr/bin/env python3
"""
Example: Building a brand's design tokens.

Validates the sample 'acme' brand, then builds every artifact into a
temporary directory and prints part of the generated Tailwind bundle.

Usage:
    python examples/build_brand.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_design_tokens.builder import TokenBuilder
from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.storage import TokenDocumentLoader


def main() -> None:
    """Demonstrate the token pipeline."""
    print("CHUK Design Tokens Demo")
    print("=" * 40)
    print()

    brands_dir = Path(__file__).parent / "brands"
    print(f"Brands: {', '.join(TokenDocumentLoader(brands_dir).list_brands())}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        output_dir = Path(tmp)
        builder = TokenBuilder(
            BuildConfig(brand="acme", brands_dir=brands_dir, output_dir=output_dir)
        )

        result = builder.validate()
        if not result.ok:
            print(f"Validation failed: {result.error.message}")
            return
        print(f"Valid: {len(result.theme_names)} theme(s)")
        for theme in result.table.themes.values():
            counts = ", ".join(f"{m.name}={len(m)}" for m in theme.modes.values())
            print(f"  {theme.name}: {counts}")
        print()

        result = builder.build()
        print(f"Wrote {len(result.written)} file(s):")
        for path in result.written:
            print(f"  {path.relative_to(output_dir)}")
        print()

        print("tailwind/app.css:")
        print((output_dir / "tailwind" / "app.css").read_text())


if __name__ == "__main__":
    main()
