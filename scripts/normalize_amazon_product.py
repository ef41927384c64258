#!/usr/bin/env python3
"""
Normalize an Amazon product record or extract an ASIN from a product URL.

    normalize_amazon_product.py convert product.json
    cat product.json | normalize_amazon_product.py convert -
    normalize_amazon_product.py asin https://www.amazon.com/dp/B0DCPKM21Y
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from adapters.amazon.amazon_product_mapper import convert_amazon_product
from adapters.amazon.amazon_url_parser import extract_asin_from_url
from common_py.logging_config import configure_logging
from contracts.validator import validate_amazon_product

# stdout carries the JSON document only
logger = configure_logging("scripts:normalize_amazon_product", stream=sys.stderr)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser"""
    parser = argparse.ArgumentParser(
        description="Convert Amazon product data to the normalized product model"
    )
    subparsers = parser.add_subparsers(dest="action", required=True)

    convert = subparsers.add_parser("convert", help="Validate and convert a product record")
    convert.add_argument(
        "path",
        help="Path to a JSON product record, or '-' to read stdin"
    )
    convert.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation of the output (default: 2)"
    )

    asin = subparsers.add_parser("asin", help="Extract the ASIN from a product URL")
    asin.add_argument("url", help="Amazon product URL")

    return parser


def _read_record(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def run_convert(path: str, indent: int) -> int:
    try:
        record = _read_record(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read product record", path=path, error=str(e))
        return 1

    if not validate_amazon_product(record, diagnostics=logger):
        logger.error("Product record is invalid", path=path)
        return 1

    product = convert_amazon_product(record)
    payload = product.model_dump(mode="json", exclude_none=True)
    payload["metadata"] = {
        key: value for key, value in payload["metadata"].items() if value is not None
    }
    print(json.dumps(payload, indent=indent, ensure_ascii=False))
    return 0


def run_asin(url: str) -> int:
    asin = extract_asin_from_url(url)
    if asin is None:
        logger.error("No ASIN found in URL", url=url)
        return 1

    print(asin)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point"""
    args = setup_argument_parser().parse_args(argv)

    if args.action == "convert":
        return run_convert(args.path, args.indent)
    return run_asin(args.url)


if __name__ == "__main__":
    sys.exit(main())
