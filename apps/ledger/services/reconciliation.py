"""
Ledger reconciliation.

The aggregates on User are a cache of the ledger. These functions
recompute them from AinaBucksTransaction and report (optionally repair)
any drift:

    current  = sum of all amounts
    earned   = sum of EARNED amounts
    redeemed = -(sum of REDEEMED amounts)
    hours    = sum of EARNED hours
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import Q, Sum

from apps.accounts.models import User
from apps.accounts.services import UserNotFoundError
from apps.common.guards import admin_required
from apps.common.invalidation import invalidate_views, profile_key
from apps.ledger.models import AinaBucksTransaction, TransactionType

logger = logging.getLogger(__name__)

AGGREGATE_FIELDS = (
    'current_aina_bucks',
    'total_aina_bucks_earned',
    'total_aina_bucks_redeemed',
    'total_hours_volunteered',
)


def compute_ledger_totals(user_id: UUID) -> dict:
    """Aggregates as implied by the user's ledger entries."""
    totals = AinaBucksTransaction.objects.filter(user_id=user_id).aggregate(
        current=Sum('amount'),
        earned=Sum('amount', filter=Q(type=TransactionType.EARNED)),
        redeemed=Sum('amount', filter=Q(type=TransactionType.REDEEMED)),
        hours=Sum('hours_worked', filter=Q(type=TransactionType.EARNED)),
    )

    return {
        'current_aina_bucks': totals['current'] or 0,
        'total_aina_bucks_earned': totals['earned'] or 0,
        'total_aina_bucks_redeemed': -(totals['redeemed'] or 0),
        'total_hours_volunteered': Decimal(totals['hours'] or 0).quantize(Decimal('0.01')),
    }


def _reconcile(user_id, repair: bool) -> dict:
    with transaction.atomic():
        try:
            user = User.objects.select_for_update().get(id=user_id)
        except User.DoesNotExist:
            raise UserNotFoundError(f"User with ID {user_id} not found")

        expected = compute_ledger_totals(user.id)
        stored = {field: getattr(user, field) for field in AGGREGATE_FIELDS}
        drift = [field for field in AGGREGATE_FIELDS if stored[field] != expected[field]]

        repaired = False
        if drift:
            logger.warning(
                "Ledger drift for user %s on %s (stored=%s expected=%s)",
                user.id, ', '.join(drift), stored, expected,
            )
            if repair:
                User.objects.filter(id=user.id).update(**expected)
                invalidate_views(profile_key(user.id))
                repaired = True
                logger.info("Repaired aggregates of user %s", user.id)

    return {
        'user_id': str(user.id),
        'stored': stored,
        'expected': expected,
        'drift': drift,
        'repaired': repaired,
    }


def reconcile_user_balance(*, user_id: UUID) -> dict:
    """
    Compare a user's stored aggregates with the ledger. Read only.

    Returns:
        Dict with 'user_id', 'stored', 'expected', 'drift' (field names that
        differ) and 'repaired' (always False)

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    return _reconcile(user_id, repair=False)


@admin_required
def repair_user_balance(*, user_id: UUID, actor: User) -> dict:
    """
    Overwrite a user's drifted aggregates with the ledger values.

    Returns:
        Same report as ``reconcile_user_balance``, with 'repaired' set when
        anything changed

    Raises:
        UserNotFoundError: If user doesn't exist
        UnauthorizedError: If actor is not an approved admin
    """
    report = _reconcile(user_id, repair=True)
    if report['repaired']:
        logger.info("Balance repair of user %s requested by %s", user_id, actor.id)
    return report


def _drifted(repair: bool) -> list:
    reports = []
    for user_id in User.objects.order_by('created_at').values_list('id', flat=True):
        report = _reconcile(user_id, repair=repair)
        if report['drift']:
            reports.append(report)
    return reports


def audit_balances() -> list:
    """
    Reconcile every user without changing anything.

    Returns:
        Reports of the users whose aggregates drifted
    """
    return _drifted(repair=False)


def repair_drifted_balances() -> list:
    """
    Repair every drifted user.

    Operator entry point for ``manage.py audit_balances --fix``, which runs
    with shell access rather than through the API.
    """
    reports = _drifted(repair=True)
    logger.info("Repaired aggregates of %d user(s) from the command line", len(reports))
    return reports
