import pytest

from memberkit.domain import NOT_AVAILABLE
from memberkit.errors import (
    ArgumentMismatchError,
    CheckedError,
    InstanceRequiredError,
    UnexpectedCheckedError,
)
from memberkit.introspection import member
from memberkit.kinds import IntKind, Integer, Long
from memberkit.reflection import (
    find_public_member,
    invoke,
    invoke_compatible,
    invoke_public_if_available,
    invoke_static,
    invoke_with_checked_throws,
)


class QuotaExceeded(CheckedError):
    pass


class Account:
    calls = 0

    def __init__(self, balance: int = 0):
        self.balance = balance

    @member("deposit")
    def deposit_int(self, amount: IntKind) -> str:
        self.balance += amount
        return "int"

    @member("deposit")
    def deposit_integer(self, amount: Integer) -> str:
        self.balance += amount
        return "Integer"

    @member("deposit")
    def deposit_long(self, amount: Long) -> str:
        self.balance += amount
        return "Long"

    def label(self, prefix: str, suffix: str) -> str:
        return f"{prefix}{self.balance}{suffix or ''}"

    def withdraw(self, amount: IntKind) -> int:
        if amount > self.balance:
            raise QuotaExceeded(f"cannot withdraw {amount}")
        self.balance -= amount
        return self.balance

    @staticmethod
    def doSomething() -> str:
        Account.calls += 1
        return "done"

    @staticmethod
    def open(balance: Integer) -> "Account":
        return Account(balance)

    def _audit(self) -> str:
        return "audited"


class SavingsAccount(Account):
    pass


@pytest.fixture
def account():
    return Account(10)


def test_invoke_by_explicit_parameter_types(account):
    assert invoke(Account, account, "deposit", (IntKind,), Integer(5)) == "int"
    assert invoke(Account, account, "deposit", (Integer,), Integer(5)) == "Integer"
    assert account.balance == 20


def test_invoke_by_explicit_types_accepts_none_arguments(account):
    assert invoke(Account, account, "label", (str, str), "$", None) == "$10"


def test_invoke_compatible_prefers_exact_boxed_overload(account):
    assert invoke_compatible(Account, account, "deposit", Integer(5)) == "Integer"
    assert invoke_compatible(Account, account, "deposit", Long(5)) == "Long"


def test_invoke_compatible_searches_ancestors():
    savings = SavingsAccount(1)

    assert invoke_compatible(SavingsAccount, savings, "deposit", Integer(2)) == "Integer"
    assert savings.balance == 3


def test_class_argument_passes_none(account):
    assert invoke_compatible(Account, account, "label", "#", str) == "#10"


def test_none_argument_value_is_rejected(account):
    with pytest.raises(ArgumentMismatchError, match="argument 1"):
        invoke_compatible(Account, account, "label", "#", None)


def test_plain_int_is_not_compatible_with_primitive_kind(account):
    with pytest.raises(ArgumentMismatchError, match=r"No compatible method found: deposit\(int\)"):
        invoke_compatible(Account, account, "deposit", 5)


def test_static_invocation_is_repeatable():
    Account.calls = 0

    results = [invoke_static(Account, "doSomething") for _ in range(3)]

    assert results == ["done", "done", "done"]
    assert Account.calls == 3


def test_static_form_through_invoke_compatible():
    opened = invoke_compatible(Account, None, "open", Integer(7))

    assert opened.balance == 7


def test_static_form_rejects_instance_member():
    with pytest.raises(InstanceRequiredError):
        invoke_static(Account, "label", "a", "b")


def test_checked_failure_contracts(account):
    with pytest.raises(UnexpectedCheckedError) as wrapped:
        invoke(Account, account, "withdraw", (IntKind,), Integer(100))
    assert isinstance(wrapped.value.__cause__, QuotaExceeded)

    with pytest.raises(QuotaExceeded):
        invoke_with_checked_throws(Account, account, "withdraw", (IntKind,), Integer(100))


def test_checked_throws_variant_returns_value(account):
    assert invoke_with_checked_throws(Account, account, "withdraw", (Integer,), Integer(4)) == 6


def test_unknown_member_is_argument_mismatch(account):
    with pytest.raises(ArgumentMismatchError, match=r"Specified method not found: close\(\)"):
        invoke(Account, account, "close", ())


def test_public_member_by_exact_signature(account):
    assert invoke_public_if_available(Account, account, "label", (str, str), "<", ">") == "<10>"
    assert find_public_member(SavingsAccount, "label", (str, str)).declaring_type is Account


def test_public_member_lookup_ignores_boxing_equivalence(account):
    assert invoke_public_if_available(Account, account, "withdraw", (Integer,), Integer(1)) is NOT_AVAILABLE
    assert invoke_public_if_available(Account, account, "withdraw", (IntKind,), Integer(1)) == 9


def test_private_member_is_not_available_publicly(account):
    assert invoke_public_if_available(Account, account, "_audit", ()) is NOT_AVAILABLE
    assert invoke(Account, account, "_audit", ()) == "audited"
