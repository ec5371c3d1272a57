"""Services for the ʻĀina Bucks ledger."""

from .exceptions import InsufficientBalanceError
from .queries import get_user_transactions
from .adjustments import adjust_balance
from .reconciliation import (
    compute_ledger_totals,
    reconcile_user_balance,
    repair_user_balance,
    audit_balances,
    repair_drifted_balances,
)

__all__ = [
    # Exceptions
    'InsufficientBalanceError',
    # Services
    'get_user_transactions',
    'adjust_balance',
    'compute_ledger_totals',
    'reconcile_user_balance',
    'repair_user_balance',
    'audit_balances',
    'repair_drifted_balances',
]
