"""
Command-line interface for statement conversion.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .issuers import UnknownIssuerError
from .parser import StatementParser
from .pdf_loader import DEFAULT_PDFTOTEXT, DEFAULT_TIMEOUT, StatementLoadError

logger = logging.getLogger(__name__)


def load_config(config_file: str | None) -> dict:
    """Load CLI configuration from JSON file."""
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        logger.debug(f"CLI config file {config_file} does not exist")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        logger.debug(f"Loaded CLI config from {config_file}")
        return config
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in CLI config file {config_file}: {e}")
        return {}
    except OSError as e:
        logger.warning(f"Failed to load CLI config from {config_file}: {e}")
        return {}


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert credit card statement PDFs to CSV",
        epilog=(
            "Amounts are normalized: currency symbols and thousands separators "
            "are removed and every amount has two decimal places "
            "(-$1,234.5 is written as -1234.50)."
        ),
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Statement PDF files, converted in order",
    )

    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output to file (default: stdout)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--config",
        help="Path to CLI configuration file (contains defaults for output, issuer, pdftotext, timeout, delimiter)",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log a conversion summary after writing the CSV",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config)

    if not args.files:
        logger.error("no files specified")
        sys.exit(1)

    try:
        statement_parser = StatementParser(
            pdftotext=config.get("pdftotext", DEFAULT_PDFTOTEXT),
            timeout=config.get("timeout", DEFAULT_TIMEOUT),
            issuer=config.get("issuer"),
            delimiter=config.get("delimiter", ","),
        )
    except UnknownIssuerError as e:
        logger.error(str(e))
        sys.exit(1)

    output = args.output or config.get("output")
    try:
        outfile = (
            open(output, "w", encoding="utf-8", newline="") if output else sys.stdout
        )
    except OSError as e:
        logger.error(f"Failed to open output file {output}: {e}")
        sys.exit(1)

    statements = []
    try:
        statement_parser.write_header(outfile)
        for file_path in args.files:
            try:
                statement = statement_parser.parse_file(file_path)
            except StatementLoadError as e:
                logger.error(str(e))
                sys.exit(1)
            rows = statement_parser.write_statement(statement, outfile)
            logger.debug(f"Wrote {rows} rows for {file_path}")
            statements.append(statement)
    finally:
        if outfile is not sys.stdout:
            outfile.close()

    if args.summary:
        logger.info(statement_parser.format_summary(statements))


if __name__ == "__main__":
    main()
