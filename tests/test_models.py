"""Unit tests for models.py."""

import dataclasses

import pytest

from cardparsing.models import Statement, Transaction, normalize_amount


class TestNormalizeAmount:
    """Tests for normalize_amount function."""

    def test_plain_amount(self):
        assert normalize_amount("12.34") == "12.34"

    def test_thousands_separator_removed(self):
        """Test that thousands separators are dropped."""
        assert normalize_amount("1,234.56") == "1234.56"

    def test_currency_symbol_removed(self):
        """Test that a dollar sign after the minus sign is dropped."""
        assert normalize_amount("-$1,000.00") == "-1000.00"

    def test_whole_number_gets_two_fraction_digits(self):
        assert normalize_amount("12") == "12.00"

    def test_surrounding_whitespace(self):
        assert normalize_amount("  $456.78 ") == "456.78"

    def test_amount_longer_than_default_precision(self):
        """Test that amounts with more than 28 digits keep every digit."""
        raw = "123456789012345678901234567890"

        assert normalize_amount(raw) == f"{raw}.00"

    def test_invalid_amount_raises(self):
        with pytest.raises(ValueError, match="Not a monetary amount"):
            normalize_amount("abc")


class TestTransaction:
    """Tests for Transaction dataclass."""

    def test_create_plain_transaction(self):
        """Test creating a Transaction from raw matched text."""
        transaction = Transaction.create(
            date="01/05/23",
            description="STARBUCKS STORE 123",
            amount="5.75",
        )

        assert transaction.date == "01/05/23"
        assert transaction.description == "STARBUCKS STORE 123"
        assert transaction.amount == "5.75"
        assert transaction.points is None
        assert transaction.order_num is None
        assert not transaction.is_rewards

    def test_create_with_order_number(self):
        """Test that the order number is appended to the description."""
        transaction = Transaction.create(
            date="01/23/23",
            description="AMAZON MKTPLACE PMTS",
            amount="12.34",
            order_num="123-4567890-1234567",
        )

        assert transaction.order_num == "123-4567890-1234567"
        assert transaction.description == "AMAZON MKTPLACE PMTS #123-4567890-1234567"
        assert "Order Number" not in transaction.description

    def test_create_with_points(self):
        """Test that a points figure marks a rewards line."""
        transaction = Transaction.create(
            date="01/23/23",
            description="AMAZON MARKETPLACE",
            amount="4.56",
            points="7,890",
        )

        assert transaction.points == "7,890"
        assert transaction.is_rewards
        assert transaction.amount == "4.56"

    def test_empty_optional_groups_become_none(self):
        transaction = Transaction.create(
            date="01/23/23",
            description="STORE",
            amount="1.00",
            points="",
            order_num="",
        )

        assert transaction.points is None
        assert transaction.order_num is None
        assert transaction.description == "STORE"

    def test_with_order_number_returns_copy(self):
        """Test attaching an order number leaves the original untouched."""
        original = Transaction.create(
            date="01/24/23",
            description="AMAZON",
            amount="9.99",
        )
        updated = original.with_order_number("111-2222222-3333333")

        assert updated.description == "AMAZON #111-2222222-3333333"
        assert updated.order_num == "111-2222222-3333333"
        assert original.description == "AMAZON"
        assert original.order_num is None

    def test_transaction_is_immutable(self):
        transaction = Transaction.create(date="01/24/23", description="X", amount="1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            transaction.amount = "2.00"

    def test_to_row(self):
        transaction = Transaction.create(
            date="01/24/23",
            description="COFFEE",
            amount="-3.50",
        )

        assert transaction.to_row() == ["01/24/23", "COFFEE", "-3.50"]


class TestStatement:
    """Tests for Statement dataclass."""

    def _statement(self):
        return Statement(
            path="statement.pdf",
            issuer="chase",
            line_items=(
                Transaction.create(date="01/01/23", description="A", amount="1.00"),
                Transaction.create(
                    date="01/02/23",
                    description="B",
                    amount="2.00",
                    points="200",
                ),
                Transaction.create(date="01/03/23", description="C", amount="-3.00"),
            ),
        )

    def test_iteration_preserves_order(self):
        statement = self._statement()

        assert [t.description for t in statement] == ["A", "B", "C"]
        assert len(statement) == 3

    def test_ledger_items_exclude_rewards(self):
        """Test that rewards lines are left out of ledger items."""
        statement = self._statement()

        assert [t.description for t in statement.ledger_items] == ["A", "C"]
        assert [t.description for t in statement.rewards_items] == ["B"]

    def test_empty_statement(self):
        statement = Statement(path="empty.pdf", issuer="boa")

        assert len(statement) == 0
        assert statement.ledger_items == []
