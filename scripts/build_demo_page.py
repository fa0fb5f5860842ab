#!/usr/bin/env python3
"""Write the Sim Rating demo page to disk.

Usage:
    python scripts/build_demo_page.py --output demo.html
    python scripts/build_demo_page.py --output demo.html --ratings tally.json

The --ratings file holds a JSON object such as
{"one_star": 4, "two_star": 8, "three_star": 15, "four_star": 27, "five_star": 42}.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sim_rating import ValidationError
from sim_rating.demo import DEMO_RATINGS, build_demo_page

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Build the Sim Rating demo page")
    parser.add_argument(
        "--output", "-o", type=Path, default=Path("demo.html"),
        help="Where to write the HTML page (default: demo.html)",
    )
    parser.add_argument(
        "--ratings", type=Path, default=None,
        help="JSON file with the tally to render (default: built-in sample)",
    )
    parser.add_argument("--title", default="Sim Rating Demo")
    args = parser.parse_args()

    ratings = DEMO_RATINGS
    if args.ratings:
        with open(args.ratings, "r") as f:
            ratings = json.load(f)

    try:
        page = build_demo_page(ratings, title=args.title)
    except ValidationError as e:
        logger.error(f"Invalid tally: {e}")
        sys.exit(1)

    args.output.write_text(page, encoding="utf-8")
    logger.info(f"Wrote demo page: {args.output} ({len(page)} chars)")


if __name__ == "__main__":
    main()
