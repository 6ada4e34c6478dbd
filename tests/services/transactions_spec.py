"""交易处理器测试：金额校验、余额检查、成功文案。"""
from __future__ import annotations

import pytest

from config import BillPayee, TransactionKind
from services import Account, PendingInput, TransactionProcessor, parse_amount


@pytest.fixture
def account() -> Account:
    return Account(pin="12345", balance=100000)


@pytest.mark.parametrize("raw", [
    "", "   ", "abc", "0", "-5", "nan", "inf", "-inf", "Infinity", None, "12abc",
    "1_000", "٥٠", "１２", "0x10", "1e999",
])
@pytest.mark.parametrize("kind", list(TransactionKind))
def test_invalid_amount_leaves_balance(account, kind, raw):
    """非数字、非有限数或 ≤ 0 的金额一律拒绝。"""
    pending = PendingInput(transfer_account="123", bill_payee=BillPayee.WATER)
    result = TransactionProcessor.apply(account, kind, raw, pending)
    assert not result.ok
    assert result.message == "Please enter a valid amount."
    assert account.balance == 100000


@pytest.mark.parametrize("kind, message", [
    (TransactionKind.WITHDRAW, "Insufficient funds."),
    (TransactionKind.TRANSFER, "Insufficient funds for transfer."),
    (TransactionKind.BILL_PAYMENT, "Insufficient funds for bill payment."),
])
def test_debit_over_balance_rejected(account, kind, message):
    """扣款超过余额时拒绝，不截断。"""
    pending = PendingInput(transfer_account="123", bill_payee=BillPayee.PHONE)
    result = TransactionProcessor.apply(account, kind, "150000", pending)
    assert not result.ok
    assert result.message == message
    assert account.balance == 100000


def test_withdraw_example(account):
    """余额 100000：先取 150000 失败，再取 2000 成功。"""
    r1 = TransactionProcessor.apply(account, TransactionKind.WITHDRAW, "150000")
    assert r1.message == "Insufficient funds."
    assert account.balance == 100000

    r2 = TransactionProcessor.apply(account, TransactionKind.WITHDRAW, "2000")
    assert r2.ok
    assert r2.message == "Successfully withdrew ₨2,000"
    assert account.balance == 98000


def test_withdraw_entire_balance(account):
    result = TransactionProcessor.apply(account, TransactionKind.WITHDRAW, 100000)
    assert result.ok
    assert account.balance == 0


@pytest.mark.parametrize("amount", ["1", "2500.75", "1e6"])
def test_deposit_always_adds(account, amount):
    result = TransactionProcessor.apply(account, TransactionKind.DEPOSIT, amount)
    assert result.ok
    assert account.balance == 100000 + float(amount)


def test_deposit_message_keeps_fraction(account):
    result = TransactionProcessor.apply(account, TransactionKind.DEPOSIT, "1234.5")
    assert result.message == "Successfully deposited ₨1,234.5"


def test_transfer_requires_account(account):
    result = TransactionProcessor.apply(
        account, TransactionKind.TRANSFER, "500", PendingInput(transfer_account=""))
    assert not result.ok
    assert result.message == "Please enter a valid account number."
    assert account.balance == 100000


def test_transfer_account_used_as_entered(account):
    """收款账号原样使用：只拒绝空串，不做 strip。"""
    result = TransactionProcessor.apply(
        account, TransactionKind.TRANSFER, "500", PendingInput(transfer_account="   "))
    assert result.ok
    assert result.message == "Successfully transferred ₨500 to account    "
    assert account.balance == 99500


def test_transfer_success(account):
    result = TransactionProcessor.apply(
        account, TransactionKind.TRANSFER, "5000", PendingInput(transfer_account="PK0042"))
    assert result.ok
    assert result.message == "Successfully transferred ₨5,000 to account PK0042"
    assert account.balance == 95000


def test_insufficient_funds_checked_before_recipient(account):
    """余额检查先于收款账号检查。"""
    result = TransactionProcessor.apply(account, TransactionKind.TRANSFER, "200000")
    assert result.message == "Insufficient funds for transfer."


def test_bill_payment_requires_payee(account):
    result = TransactionProcessor.apply(account, TransactionKind.BILL_PAYMENT, "300")
    assert not result.ok
    assert result.message == "Please select a bill payee."
    assert account.balance == 100000


def test_bill_payment_success(account):
    pending = PendingInput(bill_payee="Electricity")
    result = TransactionProcessor.apply(account, TransactionKind.BILL_PAYMENT, "3000", pending)
    assert result.ok
    assert result.message == "Successfully paid ₨3,000 to Electricity"
    assert account.balance == 97000


def test_parse_amount():
    assert parse_amount(" 42.5 ") == 42.5
    assert parse_amount(1000) == 1000.0
    assert parse_amount(True) is None
    assert parse_amount("0.0") is None


@pytest.mark.parametrize("raw, expected", [
    ("1e3", 1000.0), (".5", 0.5), ("5.", 5.0), ("+7", 7.0), (" 12 ", 12.0), ("2E-1", 0.2),
])
def test_parse_amount_decimal_forms(raw, expected):
    """只认 ASCII 十进制写法（可带符号、小数点、指数）。"""
    assert parse_amount(raw) == expected


def test_negative_opening_balance_rejected():
    with pytest.raises(ValueError):
        Account(pin="1", balance=-1)
