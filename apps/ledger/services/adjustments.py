"""
Manual balance adjustments by administrators.

An adjustment is a signed ADJUSTED ledger entry. It moves the current
balance only; lifetime earned / redeemed totals keep tracking EARNED and
REDEEMED entries.
"""

import logging
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import F

from apps.accounts.models import User
from apps.accounts.services import UserNotFoundError
from apps.common.exceptions import InvalidInputError, TransactionFailureError
from apps.common.guards import admin_required
from apps.common.invalidation import invalidate_views, profile_key
from apps.ledger.models import AinaBucksTransaction, TransactionType

from .exceptions import InsufficientBalanceError

logger = logging.getLogger(__name__)


@admin_required
def adjust_balance(
    *,
    user_id: UUID,
    amount: int,
    description: str,
    actor: User
) -> AinaBucksTransaction:
    """
    Credit (amount > 0) or debit (amount < 0) a user's balance.

    Args:
        user_id: User whose balance changes
        amount: Signed, non-zero number of ʻĀina Bucks
        description: Reason, shown in the user's history
        actor: Approving admin

    Returns:
        The ADJUSTED ledger entry

    Raises:
        UnauthorizedError: If actor is not an approved admin
        InvalidInputError: If amount is zero or description is blank
        UserNotFoundError: If user doesn't exist
        InsufficientBalanceError: If a debit exceeds the current balance
        TransactionFailureError: If the database write fails
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount == 0:
        raise InvalidInputError("Adjustment amount must be a non-zero whole number.")
    if not description or not description.strip():
        raise InvalidInputError("A description is required.")

    try:
        with transaction.atomic():
            try:
                user = User.objects.select_for_update().get(id=user_id)
            except User.DoesNotExist:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            if user.current_aina_bucks + amount < 0:
                raise InsufficientBalanceError(
                    f"Balance is {user.current_aina_bucks}, cannot debit {-amount}."
                )

            entry = AinaBucksTransaction.objects.create(
                user=user,
                type=TransactionType.ADJUSTED,
                amount=amount,
                description=description.strip(),
                approved_by=actor,
            )
            User.objects.filter(id=user.id).update(
                current_aina_bucks=F('current_aina_bucks') + amount
            )
    except DatabaseError as e:
        logger.exception("Balance adjustment for user %s failed", user_id)
        raise TransactionFailureError() from e

    logger.info("Adjusted balance of %s by %+d (by %s)", user_id, amount, actor.id)
    invalidate_views(profile_key(user_id))
    return entry
