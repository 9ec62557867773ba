"""
Per-issuer statement text formats.

Each issuer is described by an ``IssuerFormat``: the due-date anchor used to
recover the statement year, plus the line patterns fed to the line-item
recognizer. ``ISSUER_FORMATS`` lists them in due-date fallback order.
"""

import re
from dataclasses import dataclass
from enum import Enum


class UnknownIssuerError(ValueError):
    """Exception raised when an issuer name is not registered."""


class DateStyle(Enum):
    """How an issuer prints transaction dates."""

    MONTH_DAY = "MM/DD"
    FULL = "MM/DD/YY"
    SPELLED_MONTH = "Mon DD"


MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

# Either an order number or a points figure may follow the amount. The order
# number alternative goes first, otherwise the single space before
# "Order Number" would satisfy an empty points match.
TRAILER = r"""
    (?:
        \s*
        Order\s+Number\s+
        (?P<order_num>\S+)
        |
        [ ]
        (?P<points>[1-9][\d,]+)
    )?
"""

SPELLED_MONTH = (
    r"\b(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?"
    r"|Jul(?:y)?|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?"
    r"|Dec(?:ember)?)\s\d{1,2}"
)

ORDER_NUMBER_LINE = re.compile(r"^\s*Order\s+Number\s+(?P<order_num>\S+)\s*$")


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.VERBOSE)


@dataclass(frozen=True)
class IssuerFormat:
    """Patterns and date rules for one card issuer's statement text."""

    name: str
    display_name: str
    due_date_pattern: re.Pattern
    line_item_pattern: re.Pattern
    header_pattern: re.Pattern | None = None
    amount_pattern: re.Pattern | None = None
    skip_pattern: re.Pattern | None = None
    carried_date_pattern: re.Pattern | None = None
    needs_year: bool = False
    date_style: DateStyle = DateStyle.FULL

    def format_date(self, raw: str, year: str) -> str:
        """
        Turn a matched date field into the ledger date.

        Args:
            raw: Date text as matched on the statement line
            year: Year recovered from the due-date anchor

        Returns:
            ``MM/DD`` completed with ``year`` when the issuer omits it,
            otherwise the date as printed
        """
        date = raw.strip()
        if self.date_style is DateStyle.SPELLED_MONTH:
            month_name, day = date.split()
            date = f"{MONTHS[month_name[:3].upper()]:02d}/{int(day):02d}"
        if self.needs_year:
            date = f"{date}/{year}"
        return date


CHASE = IssuerFormat(
    name="chase",
    display_name="Chase",
    due_date_pattern=_compile(
        r"""
        Payment\s+Due\s+Date:?
        \s+
        (?P<month>\d{2})/(?P<day>\d{2})/(?P<year>\d{2})
        """,
    ),
    # Amazon orders:   01/23 AMAZON MKTPLACE PMTS AMZN.COM/BILL WA 12.34
    #                  Order Number 123-4567890-1234567
    # Rewards points:  01/23 AMAZON MARKETPLACE AMZN.COM/BILLWA 4.56 7,890
    line_item_pattern=_compile(
        r"""
        (?P<date>\d{2}/\d{2})
        \s+
        (?P<description>.+)
        \s+
        (?P<amount>-?[\d,]+\.\d{2})
        """
        + TRAILER,
    ),
    needs_year=True,
    date_style=DateStyle.MONTH_DAY,
)

AMEX = IssuerFormat(
    name="amex",
    display_name="American Express",
    due_date_pattern=_compile(
        r"""
        Payment\s+Due\s+Date:?
        \s+
        (?P<month>\d{2})/(?P<day>\d{2})/(?P<year>\d{2})
        """,
    ),
    line_item_pattern=_compile(
        r"""
        (?P<date>\d{2}/\d{2}/\d{2})\*?
        \s+
        (?P<description>[^$].*)
        \s+
        (?P<amount>-?\$[\d,]+\.\d{2})
        """
        + TRAILER,
    ),
    header_pattern=_compile(
        r"""
        (?P<date>\d{2}/\d{2}/\d{2})\*?
        \s+
        (?P<description>[^$].*)
        """,
    ),
    amount_pattern=re.compile(r"^\s*-?\$[\d,]+\.\d{2}\s*$"),
    skip_pattern=re.compile(r"Account Ending"),
)

DISCOVER = IssuerFormat(
    name="discover",
    display_name="Discover",
    due_date_pattern=_compile(
        r"""
        Payment\s+Due\s+Date:?
        \s+
        (?P<month>\w+)\s(?P<day>\d{2}),\s(?P<year>\d{4})
        """,
    ),
    # Transaction date, then posting date.
    line_item_pattern=_compile(
        rf"""
        (?P<date>{SPELLED_MONTH})
        \s+
        {SPELLED_MONTH}
        \s+
        (?P<description>.+)
        \s+
        (?P<amount>-?[\d,]+\.\d{{2}})
        """
        + TRAILER,
    ),
    carried_date_pattern=_compile(
        r"""
        (?P<description>INTEREST\s+CHARGE\s+ON\s+PURCHASES)
        \s+\$\s*
        (?P<amount>-?[\d,]+\.\d{2})
        """,
    ),
    needs_year=True,
    date_style=DateStyle.SPELLED_MONTH,
)

BOA = IssuerFormat(
    name="boa",
    display_name="Bank of America",
    due_date_pattern=_compile(
        r"""
        Ending\s+balance\s+on
        \s+
        (?P<month>\w+)\s(?P<day>\d{2}),\s(?P<year>\d{4})
        """,
    ),
    line_item_pattern=_compile(
        r"""
        (?P<date>\d{2}/\d{2}/\d{2})
        \s+
        (?P<description>.+)
        \s+
        (?P<amount>-?[\d,]+\.\d{2})
        """
        + TRAILER,
    ),
    header_pattern=_compile(
        r"""
        (?P<date>\d{2}/\d{2}/\d{2})\*?
        \s+
        (?P<description>[^$].*)
        """,
    ),
    amount_pattern=re.compile(r"^-?(?:0|[1-9]\d{0,2}(?:,?\d{3})*)(?:\.\d{2})?$"),
)

ISSUER_FORMATS: tuple[IssuerFormat, ...] = (CHASE, AMEX, DISCOVER, BOA)


def get_issuer(name: str) -> IssuerFormat:
    """Get a registered issuer format by name (case-insensitive)."""
    for issuer in ISSUER_FORMATS:
        if issuer.name == name.lower():
            return issuer
    raise UnknownIssuerError(
        f"Unknown issuer '{name}'. "
        f"Available issuers: {[issuer.name for issuer in ISSUER_FORMATS]}",
    )
