#!/usr/bin/env python3
"""Render every JSON fixture with every bundled theme.

Used to eyeball theme changes across both supported input shapes.

Usage:
    python scripts/generate_fixture_html.py              # All fixtures, all themes
    python scripts/generate_fixture_html.py --open       # Generate and open in browser
    python scripts/generate_fixture_html.py --fixture 01 --theme darkTheme
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

from pytest_html_reporter.config import ReporterConfig
from pytest_html_reporter.core import ReporterError, load_run_results
from pytest_html_reporter.reporting.generator import generate_html

ROOT = Path(__file__).parent.parent
FIXTURES_DIR = ROOT / "tests" / "fixtures" / "reports"
OUTPUT_DIR = ROOT / "build" / "fixture-reports"
THEMES = ["defaultTheme", "lightTheme", "darkTheme"]


def generate_fixture_html(json_path: Path, output_dir: Path, themes: list[str]) -> list[Path]:
    """Render one fixture once per theme, with failure messages and status sort."""
    results = load_run_results(json_path)
    generated = []
    for theme in themes:
        config = ReporterConfig(
            theme=theme,
            page_title=json_path.stem,
            include_failure_msg=True,
            sort="status",
        )
        html_path = output_dir / f"{json_path.stem}.{theme}.html"
        generated.append(generate_html(results, html_path, config))
    return generated


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render HTML reports from JSON test fixtures")
    parser.add_argument(
        "--open", "-o", action="store_true", help="Open generated HTML files in browser"
    )
    parser.add_argument(
        "--fixture",
        "-f",
        type=str,
        help="Render a specific fixture (e.g., '01' for 01_aggregated_results.json)",
    )
    parser.add_argument("--theme", "-t", choices=THEMES, help="Render a single theme")
    parser.add_argument(
        "--output",
        "-d",
        type=Path,
        default=OUTPUT_DIR,
        help=f"Output directory (default: {OUTPUT_DIR})",
    )

    args = parser.parse_args(argv)

    pattern = f"{args.fixture}*.json" if args.fixture else "*.json"
    fixtures = sorted(FIXTURES_DIR.glob(pattern))
    if not fixtures:
        print(f"No fixture matching '{pattern}' found in {FIXTURES_DIR}")
        return 1

    themes = [args.theme] if args.theme else THEMES
    print(f"Rendering {len(fixtures)} fixture(s) x {len(themes)} theme(s)...")

    generated: list[Path] = []
    errors: list[tuple[Path, ReporterError]] = []

    for json_path in fixtures:
        print(f"  {json_path.name}...", end=" ")
        try:
            paths = generate_fixture_html(json_path, args.output, themes)
        except ReporterError as e:
            print(f"ERROR: {e}")
            errors.append((json_path, e))
            continue
        print(f"OK -> {', '.join(p.name for p in paths)}")
        generated.extend(paths)

    print(f"\nGenerated: {len(generated)}, Errors: {len(errors)}")

    if args.open and generated:
        print(f"\nOpening {len(generated)} HTML file(s) in browser...")
        for html_path in generated:
            if sys.platform == "win32":
                subprocess.run(["start", str(html_path)], shell=True)
            elif sys.platform == "darwin":
                subprocess.run(["open", str(html_path)])
            else:
                subprocess.run(["xdg-open", str(html_path)])

    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
