"""
Reward redemption service.

Redeeming spends ʻĀina Bucks: a negative REDEEMED ledger entry, a PENDING
redemption for staff to hand out, and the balance, lifetime redeemed total
and reward stock updated in the same transaction.
"""

import logging
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.common.exceptions import InvalidInputError, TransactionFailureError
from apps.common.guards import admin_required, ensure_authenticated
from apps.common.invalidation import invalidate_views, profile_key
from apps.ledger.models import AinaBucksTransaction, TransactionType
from apps.ledger.services import InsufficientBalanceError
from apps.rewards.models import RedemptionStatus, Reward, RewardRedemption, RewardStatus

from .exceptions import (
    OutOfStockError,
    RedemptionAlreadyFulfilledError,
    RedemptionNotFoundError,
    RewardNotFoundError,
    RewardUnavailableError,
)

logger = logging.getLogger(__name__)


def redeem_reward(*, user: User, reward_id: UUID, quantity: int = 1) -> RewardRedemption:
    """
    Redeem ``quantity`` units of a reward.

    User and reward rows are locked, so concurrent redemptions can neither
    overdraw the balance nor oversell limited stock.

    Returns:
        Created RewardRedemption (status PENDING)

    Raises:
        UnauthenticatedError: If user is not signed in
        RewardNotFoundError: If reward doesn't exist
        RewardUnavailableError: If reward is not ACTIVE
        InvalidInputError: If quantity < 1
        InsufficientBalanceError: If the balance doesn't cover the cost
        OutOfStockError: If limited stock can't cover the quantity
        TransactionFailureError: If the database write fails
    """
    ensure_authenticated(user)

    try:
        with transaction.atomic():
            try:
                reward = Reward.objects.select_for_update().get(id=reward_id)
            except Reward.DoesNotExist:
                raise RewardNotFoundError(f"Reward with ID {reward_id} not found")

            if reward.status != RewardStatus.ACTIVE:
                raise RewardUnavailableError()

            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise InvalidInputError("Quantity must be at least 1.")

            buyer = User.objects.select_for_update().get(id=user.id)
            total = reward.aina_bucks_cost * quantity

            if buyer.current_aina_bucks < total:
                raise InsufficientBalanceError(
                    f"This reward costs {total} ʻĀina Bucks, you have {buyer.current_aina_bucks}."
                )

            if not reward.is_unlimited and reward.quantity_available - reward.quantity_redeemed < quantity:
                raise OutOfStockError()

            entry = AinaBucksTransaction.objects.create(
                user=buyer,
                type=TransactionType.REDEEMED,
                amount=-total,
                description=f'Redeemed {quantity} x "{reward.name}" for {total} ʻĀina Bucks',
            )
            redemption = RewardRedemption.objects.create(
                user=buyer,
                reward=reward,
                transaction=entry,
                aina_bucks_spent=total,
                quantity=quantity,
                status=RedemptionStatus.PENDING,
            )

            User.objects.filter(id=buyer.id).update(
                current_aina_bucks=F('current_aina_bucks') - total,
                total_aina_bucks_redeemed=F('total_aina_bucks_redeemed') + total,
            )
            Reward.objects.filter(id=reward.id).update(
                quantity_redeemed=F('quantity_redeemed') + quantity
            )
    except DatabaseError as e:
        logger.exception("Redemption of reward %s by user %s failed", reward_id, user.id)
        raise TransactionFailureError() from e

    logger.info("User %s redeemed %d x reward %s for %d", user.id, quantity, reward_id, total)
    invalidate_views(profile_key(user.id))
    return redemption


def get_user_redemptions(user_id: UUID) -> QuerySet[RewardRedemption]:
    return (
        RewardRedemption.objects
        .filter(user_id=user_id)
        .select_related('reward')
        .order_by('-created_at')
    )


def get_pending_redemptions() -> QuerySet[RewardRedemption]:
    return (
        RewardRedemption.objects
        .filter(status=RedemptionStatus.PENDING)
        .select_related('reward', 'user')
        .order_by('created_at')
    )


@admin_required
@transaction.atomic
def fulfill_redemption(
    *,
    redemption_id: UUID,
    actor: User,
    admin_notes: str = ''
) -> RewardRedemption:
    """
    Mark a redemption as handed out.

    Raises:
        UnauthorizedError: If actor is not an approved admin
        RedemptionNotFoundError: If redemption doesn't exist
        RedemptionAlreadyFulfilledError: If already fulfilled
    """
    try:
        redemption = RewardRedemption.objects.select_for_update().get(id=redemption_id)
    except RewardRedemption.DoesNotExist:
        raise RedemptionNotFoundError(f"Redemption with ID {redemption_id} not found")

    if redemption.status == RedemptionStatus.FULFILLED:
        raise RedemptionAlreadyFulfilledError()

    redemption.status = RedemptionStatus.FULFILLED
    redemption.fulfilled_by = actor
    redemption.fulfilled_at = timezone.now()
    if admin_notes:
        redemption.admin_notes = admin_notes
    redemption.save(update_fields=['status', 'fulfilled_by', 'fulfilled_at', 'admin_notes'])

    logger.info("Redemption %s fulfilled by %s", redemption.id, actor.id)
    return redemption
