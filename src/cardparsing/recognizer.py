"""
Line-item recognition for linearized statement text.
"""

import logging
import re

from .issuers import ORDER_NUMBER_LINE, IssuerFormat
from .models import Transaction

logger = logging.getLogger(__name__)


def _create(**fields) -> Transaction | None:
    """Build a Transaction, or None when the matched amount is unusable."""
    try:
        return Transaction.create(**fields)
    except ValueError as e:
        logger.debug(f"Ignoring unusable line item: {e}")
        return None


class LineItemRecognizer:
    """Recognizes transactions in one issuer's statement text.

    Statement text wraps records across physical lines, so the scan keeps a
    pending header (date and description seen without an amount) and the
    description accumulated for it until a bare amount line closes it out.
    Lines that match nothing are skipped; scanning never raises on them.
    """

    def __init__(self, issuer: IssuerFormat):
        self.issuer = issuer

    def scan(self, text: str, year: str) -> list[Transaction]:
        """
        Scan statement text and return its transactions in source order.

        Args:
            text: Linearized statement text
            year: Statement year used to complete partial dates

        Returns:
            List of Transaction objects
        """
        issuer = self.issuer
        transactions: list[Transaction] = []
        pending_header: re.Match | None = None
        pending_description = ""
        pending_order_num: str | None = None
        last_date: str | None = None
        just_emitted = False

        for line in text.split("\n"):
            match = issuer.line_item_pattern.search(line)
            transaction = None
            if match:
                transaction = _create(
                    date=issuer.format_date(match.group("date"), year),
                    description=match.group("description"),
                    amount=match.group("amount"),
                    points=match.groupdict().get("points"),
                    order_num=match.groupdict().get("order_num"),
                )
            if transaction is not None:
                if pending_header is not None:
                    logger.debug(
                        f"Dropping unresolved header '{pending_header.group(0)}'",
                    )
                pending_header = None
                pending_description = ""
                pending_order_num = None
                transactions.append(transaction)
                last_date = transaction.date
                just_emitted = True
                continue

            # Order numbers wrapped onto their own line
            order_match = ORDER_NUMBER_LINE.match(line)
            follows_emission = just_emitted
            just_emitted = False
            if order_match and pending_header is not None:
                pending_order_num = order_match.group("order_num")
                continue
            if order_match and follows_emission:
                previous = transactions[-1]
                if previous.order_num is None and not previous.is_rewards:
                    transactions[-1] = previous.with_order_number(
                        order_match.group("order_num"),
                    )
                continue

            if issuer.header_pattern is not None:
                match = issuer.header_pattern.search(line)
                if match:
                    if issuer.skip_pattern is not None and issuer.skip_pattern.search(
                        line,
                    ):
                        logger.debug(f"Skipping marker line '{line}'")
                        continue
                    if pending_header is not None:
                        logger.debug(
                            f"Dropping unresolved header '{pending_header.group(0)}'",
                        )
                    pending_header = match
                    pending_description = match.group("description")
                    pending_order_num = None
                    continue

            if pending_header is not None and issuer.amount_pattern is not None:
                match = issuer.amount_pattern.search(line)
                transaction = None
                if match:
                    transaction = _create(
                        date=issuer.format_date(pending_header.group("date"), year),
                        description=pending_description,
                        amount=match.group(0),
                        order_num=pending_order_num,
                    )
                if transaction is not None:
                    transactions.append(transaction)
                    last_date = transaction.date
                    pending_header = None
                    pending_description = ""
                    pending_order_num = None
                    just_emitted = True
                    continue

            if issuer.carried_date_pattern is not None and last_date is not None:
                match = issuer.carried_date_pattern.search(line)
                transaction = None
                if match:
                    transaction = _create(
                        date=last_date,
                        description=match.group("description"),
                        amount=match.group("amount"),
                    )
                if transaction is not None:
                    transactions.append(transaction)
                    continue

            if pending_header is not None:
                pending_description += " " + line

        if pending_header is not None:
            logger.debug(
                f"Dropping unresolved header '{pending_header.group(0)}' at end of text",
            )

        logger.debug(
            f"Recognized {len(transactions)} {issuer.display_name} transactions",
        )
        return transactions
