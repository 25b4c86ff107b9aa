"""Tests for sft.domain.ledger pure functions."""

import math

from sft.domain.ledger import (
    Ledger,
    SavingsGoal,
    add_transaction,
    clear_goal,
    create_transaction,
    find_transaction,
    generate_id,
    goal_from_dict,
    goal_to_dict,
    list_transactions,
    parse_goal,
    remove_transaction,
    set_goal,
    to_base36,
    toggle_ledger_theme,
    transaction_from_dict,
    transaction_to_dict,
    validate_transaction,
)
from sft.domain.models import TransactionId
from sft.domain.theme import Theme


def make_txn(txn_id: str, txn_type: str = "expense", amount: float = 1000, category: str | None = None):
    """Build a valid transaction for tests."""
    if category is None:
        category = "Gaji" if txn_type == "income" else "Makanan"
    txn, error = create_transaction(txn_type, amount, category, "2024-01-01", txn_id=TransactionId(txn_id))
    assert error is None
    assert txn is not None
    return txn


class TestGenerateId:
    """Tests for generate_id."""

    def test_starts_with_base36_timestamp(self) -> None:
        """Should prefix the ID with the timestamp in base 36."""
        txn_id = generate_id(now_ms=1_700_000_000_000)

        assert txn_id.startswith(to_base36(1_700_000_000_000))
        assert len(txn_id) == len(to_base36(1_700_000_000_000)) + 5

    def test_ids_are_unique_within_same_millisecond(self) -> None:
        """Should not collide when generated at the same instant."""
        ids = {generate_id(now_ms=1_700_000_000_000) for _ in range(50)}

        assert len(ids) == 50

    def test_base36_zero(self) -> None:
        """Should encode zero as '0'."""
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"


class TestValidateTransaction:
    """Tests for validate_transaction."""

    def test_accepts_valid_income(self) -> None:
        """Should accept a well-formed income entry."""
        assert validate_transaction("income", 5_000_000, "Gaji", "2024-01-01") is None

    def test_rejects_unknown_type(self) -> None:
        """Should reject types other than income and expense."""
        error = validate_transaction("transfer", 100, "Gaji", "2024-01-01")

        assert error is not None
        assert "Unknown transaction type" in error

    def test_rejects_non_positive_amounts(self) -> None:
        """Should reject zero and negative amounts."""
        assert validate_transaction("expense", 0, "Makanan", "2024-01-01") == "Amount must be a positive number"
        assert validate_transaction("expense", -5, "Makanan", "2024-01-01") == "Amount must be a positive number"

    def test_rejects_non_finite_amounts(self) -> None:
        """Should reject NaN and infinity."""
        assert validate_transaction("expense", math.nan, "Makanan", "2024-01-01") is not None
        assert validate_transaction("expense", math.inf, "Makanan", "2024-01-01") is not None

    def test_rejects_non_numeric_amounts(self) -> None:
        """Should reject strings and booleans."""
        assert validate_transaction("expense", "100", "Makanan", "2024-01-01") is not None
        assert validate_transaction("expense", True, "Makanan", "2024-01-01") is not None

    def test_rejects_category_from_other_type(self) -> None:
        """Should reject a category that belongs to the other type."""
        error = validate_transaction("income", 100, "Makanan", "2024-01-01")

        assert error == "Category 'Makanan' is not a valid income category"

    def test_shared_category_valid_for_both_types(self) -> None:
        """Should accept 'Lainnya' for either type."""
        assert validate_transaction("income", 100, "Lainnya", "2024-01-01") is None
        assert validate_transaction("expense", 100, "Lainnya", "2024-01-01") is None

    def test_rejects_missing_or_invalid_date(self) -> None:
        """Should require a YYYY-MM-DD date."""
        assert validate_transaction("expense", 100, "Makanan", "") == "Date is required"
        error = validate_transaction("expense", 100, "Makanan", "2024-13-01")
        assert error is not None
        assert "Invalid date" in error


class TestCreateTransaction:
    """Tests for create_transaction."""

    def test_builds_record_with_generated_id(self) -> None:
        """Should build a transaction and assign a fresh ID."""
        txn, error = create_transaction("income", 5_000_000, "Gaji", "2024-01-01", "  January salary ")

        assert error is None
        assert txn is not None
        assert txn.id
        assert txn.type == "income"
        assert txn.amount == 5_000_000
        assert txn.category == "Gaji"
        assert txn.date == "2024-01-01"
        assert txn.desc == "January salary"

    def test_returns_error_for_invalid_input(self) -> None:
        """Should return an error and no transaction."""
        txn, error = create_transaction("expense", -1, "Makanan", "2024-01-01")

        assert txn is None
        assert error == "Amount must be a positive number"


class TestAddRemove:
    """Tests for add_transaction and remove_transaction."""

    def test_add_appends_without_mutating(self) -> None:
        """Should return a new ledger with the transaction appended."""
        ledger = Ledger()
        txn = make_txn("a1")

        updated = add_transaction(ledger, txn)

        assert list_transactions(updated) == [txn]
        assert ledger.transactions == ()

    def test_remove_existing(self) -> None:
        """Should drop only the matching transaction."""
        ledger = add_transaction(add_transaction(Ledger(), make_txn("a1")), make_txn("a2"))

        updated = remove_transaction(ledger, "a1")

        assert [t.id for t in updated.transactions] == ["a2"]

    def test_remove_nonexistent_is_noop(self) -> None:
        """Should leave the list unchanged for an unknown ID."""
        ledger = add_transaction(add_transaction(Ledger(), make_txn("a1")), make_txn("a2"))

        updated = remove_transaction(ledger, "missing")

        assert updated.transactions == ledger.transactions
        assert len(updated.transactions) == 2

    def test_find_transaction(self) -> None:
        """Should find by ID or return None."""
        txn = make_txn("a1")
        ledger = add_transaction(Ledger(), txn)

        assert find_transaction(ledger, "a1") == txn
        assert find_transaction(ledger, "a2") is None


class TestGoal:
    """Tests for savings goal functions."""

    def test_parse_goal_valid(self) -> None:
        """Should parse a name and numeric target."""
        assert parse_goal(" Laptop ", 10_000_000) == SavingsGoal(name="Laptop", target=10_000_000)

    def test_parse_goal_accepts_numeric_string(self) -> None:
        """Should accept a target given as text."""
        goal = parse_goal("Laptop", "2500000")

        assert goal is not None
        assert goal.target == 2_500_000

    def test_parse_goal_rejects_invalid(self) -> None:
        """Should reject empty names and non-positive or non-numeric targets."""
        assert parse_goal("", 100) is None
        assert parse_goal("   ", 100) is None
        assert parse_goal("Laptop", 0) is None
        assert parse_goal("Laptop", -10) is None
        assert parse_goal("Laptop", "abc") is None
        assert parse_goal("Laptop", None) is None

    def test_set_goal_replaces_existing(self) -> None:
        """Should replace any previous goal."""
        ledger = set_goal(Ledger(), "Laptop", 10_000_000)
        ledger = set_goal(ledger, "Phone", 3_000_000)

        assert ledger.goal == SavingsGoal(name="Phone", target=3_000_000)

    def test_set_goal_invalid_is_silent_noop(self) -> None:
        """Should return the same ledger for invalid input."""
        ledger = set_goal(Ledger(), "Laptop", 10_000_000)

        assert set_goal(ledger, "", 5) is ledger
        assert ledger.goal == SavingsGoal(name="Laptop", target=10_000_000)

    def test_clear_goal(self) -> None:
        """Should remove the goal."""
        ledger = set_goal(Ledger(), "Laptop", 10_000_000)

        assert clear_goal(ledger).goal is None


class TestTheme:
    """Tests for toggle_ledger_theme."""

    def test_toggle_flips_theme(self) -> None:
        """Should switch dark to light and back."""
        ledger = Ledger()
        assert ledger.theme is Theme.DARK

        light = toggle_ledger_theme(ledger)
        assert light.theme is Theme.LIGHT
        assert toggle_ledger_theme(light).theme is Theme.DARK


class TestSerialization:
    """Tests for dict conversion of transactions and goals."""

    def test_transaction_dict_shape(self) -> None:
        """Should use the persisted field names."""
        txn = make_txn("a1", "income", 5_000_000)

        assert transaction_to_dict(txn) == {
            "id": "a1",
            "type": "income",
            "amount": 5_000_000,
            "category": "Gaji",
            "date": "2024-01-01",
            "desc": "",
        }

    def test_transaction_from_dict_round_trip(self) -> None:
        """Should rebuild an identical transaction."""
        txn = make_txn("a1", "expense", 12_500.5)

        assert transaction_from_dict(transaction_to_dict(txn)) == txn

    def test_transaction_from_dict_rejects_malformed(self) -> None:
        """Should return None for records missing required fields."""
        assert transaction_from_dict("not a dict") is None
        assert transaction_from_dict({"type": "income", "amount": 1}) is None
        assert transaction_from_dict({"id": "x", "type": "gift", "amount": 1}) is None
        assert transaction_from_dict({"id": "x", "type": "income", "amount": "1"}) is None

    def test_transaction_from_dict_rejects_invalid_amounts(self) -> None:
        """Should skip stored amounts that would fail validation on input."""
        for amount in (math.inf, -math.inf, math.nan, 0, -5, True):
            assert transaction_from_dict({"id": "x", "type": "expense", "amount": amount, "category": "Makanan"}) is None

    def test_transaction_from_dict_defaults_optional_desc(self) -> None:
        """Should treat a missing description as empty."""
        txn = transaction_from_dict(
            {"id": "x", "type": "income", "amount": 1, "category": "Gaji", "date": "2024-01-01"}
        )

        assert txn is not None
        assert txn.desc == ""

    def test_goal_round_trip(self) -> None:
        """Should convert goals to and from dicts."""
        goal = SavingsGoal(name="Laptop", target=10_000_000)

        assert goal_to_dict(goal) == {"name": "Laptop", "target": 10_000_000}
        assert goal_from_dict(goal_to_dict(goal)) == goal
        assert goal_from_dict(["Laptop", 1]) is None
