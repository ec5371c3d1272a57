"""Domain-specific exceptions for ledger services."""

from apps.common.exceptions import AinaBucksServiceError


class InsufficientBalanceError(AinaBucksServiceError):
    """Raised when a debit would take the balance below zero."""
    code = 'insufficient_balance'
    status_code = 400
    default_message = 'Insufficient ʻĀina Bucks balance.'
