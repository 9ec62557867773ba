"""
Output formatting for ledger CSV and run summaries.
"""

import io
import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import TextIO

import pandas as pd

from .models import Statement

logger = logging.getLogger(__name__)

LEDGER_COLUMNS = ["Date", "Description", "Amount"]


class CSVFormatter:
    """Formats statement line items as delimited ledger rows."""

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def to_dataframe(self, statement: Statement) -> pd.DataFrame:
        """Build the ledger table for a statement, leaving out rewards lines."""
        rows = [t.to_row() for t in statement.ledger_items]
        skipped = len(statement.rewards_items)
        if skipped:
            logger.debug(f"Skipping {skipped} rewards lines from {statement.path}")
        return pd.DataFrame(rows, columns=LEDGER_COLUMNS, dtype=str)

    def write_header(self, stream: TextIO) -> None:
        pd.DataFrame(columns=LEDGER_COLUMNS).to_csv(
            stream,
            sep=self.delimiter,
            index=False,
            lineterminator="\n",
        )

    def write_statement(self, statement: Statement, stream: TextIO) -> int:
        """
        Append a statement's ledger rows to an open stream.

        Args:
            statement: Parsed statement
            stream: Text stream the header was already written to

        Returns:
            Number of rows written
        """
        df = self.to_dataframe(statement)
        if not df.empty:
            df.to_csv(
                stream,
                sep=self.delimiter,
                index=False,
                header=False,
                lineterminator="\n",
            )
        return len(df)

    def format_csv(self, statements: Iterable[Statement]) -> str:
        """Format statements as one CSV document with a single header row."""
        buffer = io.StringIO()
        self.write_header(buffer)
        for statement in statements:
            self.write_statement(statement, buffer)
        return buffer.getvalue()


class SummaryFormatter:
    """Formats summary information."""

    @staticmethod
    def format_summary(statements: list[Statement]) -> str:
        """Format a summary of converted statements."""
        line_items = [t for statement in statements for t in statement]
        ledger_items = [t for t in line_items if not t.is_rewards]
        amounts = [Decimal(t.amount) for t in ledger_items]
        charges = sum((a for a in amounts if a >= 0), Decimal("0.00"))
        credits = sum((a for a in amounts if a < 0), Decimal("0.00"))

        lines = []
        lines.append("=== Statement Conversion Summary ===")
        lines.append(f"Statements processed: {len(statements)}")
        lines.append(f"Transactions recognized: {len(line_items)}")
        lines.append(f"Rewards lines skipped: {len(line_items) - len(ledger_items)}")
        lines.append(f"Ledger rows: {len(ledger_items)}")
        lines.append(f"Total charges: {charges:.2f}")
        lines.append(f"Total credits: {abs(credits):.2f}")

        if statements:
            lines.append("")
            lines.append("Per statement:")
            for statement in statements:
                lines.append(
                    f"  {statement.path} [{statement.issuer}]: "
                    f"{len(statement.ledger_items)} rows",
                )

        return "\n".join(lines)
