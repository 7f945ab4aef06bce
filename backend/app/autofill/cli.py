"""
Autofill Command Line Runner

Opens a page in Chromium, autofills a form and prints a JSON summary.

Usage:
    python -m autofill --url URL [--selector SELECTOR] [--seed-json PATH] [--submit]

Examples:
    python -m autofill --url https://example.com/signup
    python -m autofill --url https://example.com/signup --seed-json seed.json --submit
    python -m autofill --url file:///tmp/form.html --selector "#contact" --random-seed 42
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import FillConfig
from .errors import AutoFillError, ConfigError
from .form_filler import FormFiller
from .playwright_automation import PlaywrightAutomation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_AUTOMATION = 3


def load_seed(path: Optional[str]) -> Any:
    """A JSON scalar becomes a simple seed, an object a structured one"""
    if not path:
        return None
    return json.loads(Path(path).read_text(encoding="utf-8"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autofill",
        description="Autofill a web form with seeded or generated test data"
    )
    parser.add_argument("--url", required=True, help="Page to open")
    parser.add_argument(
        "--selector", default="form",
        help="CSS selector of the form/controls to fill (default: form)"
    )
    parser.add_argument("--seed-json", help="JSON file with the seed value")
    parser.add_argument("--submit", action="store_true", help="Submit the form after filling")
    parser.add_argument("--headless", action="store_true", help="Run the browser headless")
    parser.add_argument("--random-seed", type=int, help="Seed for generated data")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # AUTOFILL_* overrides may come from a .env file in the working directory
    load_dotenv(Path.cwd() / ".env")
    try:
        config = FillConfig.from_env()
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE
    if args.random_seed is not None:
        config = replace(config, random_seed=args.random_seed)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        seed = load_seed(args.seed_json)
    except (OSError, ValueError) as e:
        print(f"Could not read seed: {e}", file=sys.stderr)
        return EXIT_USAGE

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=args.headless)
        try:
            page = browser.new_page()
            page.goto(args.url)

            filler = FormFiller(PlaywrightAutomation(page), config=config)
            result = filler.auto_fill(args.selector, seed)
            if args.submit:
                result.then_submit()

            print(json.dumps({
                "url": page.url,
                "submitted": bool(args.submit),
                "summary": result.summary.to_dict()
            }, indent=2))
        except AutoFillError as e:
            print(f"Autofill failed: {e}", file=sys.stderr)
            return EXIT_USAGE
        except PlaywrightError as e:
            logger.error("Browser automation failed: %s", e)
            return EXIT_AUTOMATION
        finally:
            browser.close()

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
