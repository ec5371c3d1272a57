"""Reward catalog management (admin only) and catalog reads."""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.common.exceptions import InvalidInputError
from apps.common.guards import admin_required
from apps.rewards.models import Reward, RewardStatus

from .exceptions import RewardNotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({
    'name',
    'description',
    'image_url',
    'aina_bucks_cost',
    'quantity_available',
    'status',
})


def _validate(reward: Reward) -> None:
    try:
        reward.full_clean(exclude=['created_by'])
    except ValidationError as e:
        raise InvalidInputError(
            '; '.join(f"{field}: {' '.join(errors)}" for field, errors in e.message_dict.items())
        )


def _get_locked_reward(reward_id) -> Reward:
    try:
        return Reward.objects.select_for_update().get(id=reward_id)
    except Reward.DoesNotExist:
        raise RewardNotFoundError(f"Reward with ID {reward_id} not found")


def get_active_rewards() -> QuerySet[Reward]:
    """Rewards volunteers can redeem, cheapest first."""
    return Reward.objects.filter(status=RewardStatus.ACTIVE).order_by('aina_bucks_cost', 'name')


def get_all_rewards() -> QuerySet[Reward]:
    return Reward.objects.order_by('status', 'aina_bucks_cost', 'name')


@admin_required
@transaction.atomic
def create_reward(*, actor: User, **fields) -> Reward:
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise InvalidInputError(f"Unknown reward fields: {', '.join(sorted(unknown))}")

    reward = Reward(created_by=actor, **fields)
    _validate(reward)
    reward.save()

    logger.info("Reward %s created by %s", reward.id, actor.id)
    return reward


@admin_required
@transaction.atomic
def update_reward(*, reward_id: UUID, actor: User, **changes) -> Reward:
    """
    Update a reward.

    Limited stock cannot be lowered below what was already redeemed.
    """
    not_editable = set(changes) - EDITABLE_FIELDS
    if not_editable:
        raise InvalidInputError(f"Fields cannot be changed: {', '.join(sorted(not_editable))}")

    reward = _get_locked_reward(reward_id)
    for field, value in changes.items():
        setattr(reward, field, value)
    _validate(reward)

    if not reward.is_unlimited and reward.quantity_available < reward.quantity_redeemed:
        raise InvalidInputError(
            f"Quantity available cannot be below the {reward.quantity_redeemed} already redeemed."
        )

    reward.save()
    logger.info("Reward %s updated by %s", reward.id, actor.id)
    return reward


@admin_required
@transaction.atomic
def delete_reward(*, reward_id: UUID, actor: User) -> bool:
    """
    Remove a reward from the catalog.

    A reward that was ever redeemed is archived so the redemption history
    keeps pointing at it; otherwise it is deleted.

    Returns:
        True if deleted, False if archived
    """
    reward = _get_locked_reward(reward_id)

    if reward.redemptions.exists():
        reward.status = RewardStatus.ARCHIVED
        reward.save(update_fields=['status', 'updated_at'])
        logger.info("Reward %s archived by %s", reward.id, actor.id)
        return False

    reward.delete()
    logger.info("Reward %s deleted by %s", reward_id, actor.id)
    return True
