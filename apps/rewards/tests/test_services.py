"""
Tests for rewards services.

Redemption arithmetic, balance and stock guards, fulfillment and
admin-only catalog management.
"""

import uuid
from unittest.mock import patch

import pytest
from django.contrib.auth.models import AnonymousUser
from django.db import DatabaseError

from apps.common.exceptions import (
    InvalidInputError,
    TransactionFailureError,
    UnauthenticatedError,
    UnauthorizedError,
)
from apps.ledger.models import AinaBucksTransaction, TransactionType
from apps.ledger.services import (
    InsufficientBalanceError,
    adjust_balance,
    reconcile_user_balance,
)
from apps.rewards.models import RedemptionStatus, Reward, RewardRedemption, RewardStatus
from apps.rewards.services import (
    OutOfStockError,
    RedemptionAlreadyFulfilledError,
    RedemptionNotFoundError,
    RewardNotFoundError,
    RewardUnavailableError,
    create_reward,
    delete_reward,
    fulfill_redemption,
    get_active_rewards,
    get_pending_redemptions,
    get_user_redemptions,
    redeem_reward,
    update_reward,
)


@pytest.mark.django_db
class TestRedeemReward:

    def test_redeem_two_units(self, funded_volunteer, reward):
        """100 - 30 x 2 = 40."""
        redemption = redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=2)

        assert redemption.status == RedemptionStatus.PENDING
        assert redemption.aina_bucks_spent == 60
        assert redemption.quantity == 2

        entry = redemption.transaction
        assert entry.type == TransactionType.REDEEMED
        assert entry.amount == -60
        assert entry.description == 'Redeemed 2 x "Reusable Water Bottle" for 60 ʻĀina Bucks'

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 40
        assert funded_volunteer.total_aina_bucks_redeemed == 60
        assert funded_volunteer.total_aina_bucks_earned == 100

        reward.refresh_from_db()
        assert reward.quantity_redeemed == 2
        assert reward.quantity_remaining == 8

        assert reconcile_user_balance(user_id=funded_volunteer.id)['drift'] == []

    def test_second_redemption_overdraws(self, volunteer, make_reward, admin_account):
        """Balance 60, cost 50: the first succeeds, the second fails."""
        adjust_balance(user_id=volunteer.id, amount=60, description='Seed', actor=admin_account)
        reward = make_reward(aina_bucks_cost=50)

        redeem_reward(user=volunteer, reward_id=reward.id)
        with pytest.raises(InsufficientBalanceError):
            redeem_reward(user=volunteer, reward_id=reward.id)

        volunteer.refresh_from_db()
        assert volunteer.current_aina_bucks == 10
        assert RewardRedemption.objects.filter(user=volunteer).count() == 1
        assert AinaBucksTransaction.objects.filter(type=TransactionType.REDEEMED).count() == 1

    def test_exact_balance(self, funded_volunteer, make_reward):
        reward = make_reward(aina_bucks_cost=100)

        redeem_reward(user=funded_volunteer, reward_id=reward.id)

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 0

    def test_out_of_stock(self, funded_volunteer, make_reward):
        reward = make_reward(aina_bucks_cost=10, quantity_available=1)
        redeem_reward(user=funded_volunteer, reward_id=reward.id)

        with pytest.raises(OutOfStockError):
            redeem_reward(user=funded_volunteer, reward_id=reward.id)

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 90

    def test_quantity_above_stock(self, funded_volunteer, make_reward):
        reward = make_reward(aina_bucks_cost=10, quantity_available=2)

        with pytest.raises(OutOfStockError):
            redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=3)

    def test_unlimited_stock(self, funded_volunteer, make_reward):
        reward = make_reward(aina_bucks_cost=10, quantity_available=Reward.UNLIMITED)

        redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=5)

        reward.refresh_from_db()
        assert reward.is_unlimited
        assert reward.quantity_remaining is None
        assert reward.quantity_redeemed == 5

    @pytest.mark.parametrize('status', [RewardStatus.INACTIVE, RewardStatus.ARCHIVED])
    def test_unavailable_reward(self, funded_volunteer, make_reward, status):
        reward = make_reward(status=status)

        with pytest.raises(RewardUnavailableError):
            redeem_reward(user=funded_volunteer, reward_id=reward.id)

    @pytest.mark.parametrize('quantity', [0, -1, True])
    def test_invalid_quantity(self, funded_volunteer, reward, quantity):
        with pytest.raises(InvalidInputError):
            redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=quantity)

    def test_unknown_reward(self, funded_volunteer):
        with pytest.raises(RewardNotFoundError):
            redeem_reward(user=funded_volunteer, reward_id=uuid.uuid4())

    def test_anonymous(self, reward):
        with pytest.raises(UnauthenticatedError):
            redeem_reward(user=AnonymousUser(), reward_id=reward.id)

    def test_failure_rolls_back(self, funded_volunteer, reward):
        with patch.object(
            RewardRedemption.objects, 'create', side_effect=DatabaseError('disk full')
        ):
            with pytest.raises(TransactionFailureError):
                redeem_reward(user=funded_volunteer, reward_id=reward.id)

        funded_volunteer.refresh_from_db()
        reward.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 100
        assert reward.quantity_redeemed == 0
        assert not AinaBucksTransaction.objects.filter(type=TransactionType.REDEEMED).exists()


@pytest.mark.django_db
class TestFulfillRedemption:

    def test_fulfill(self, admin_account, funded_volunteer, reward):
        redemption = redeem_reward(user=funded_volunteer, reward_id=reward.id)

        fulfilled = fulfill_redemption(
            redemption_id=redemption.id,
            actor=admin_account,
            admin_notes='Picked up at the office',
        )

        assert fulfilled.status == RedemptionStatus.FULFILLED
        assert fulfilled.fulfilled_by == admin_account
        assert fulfilled.fulfilled_at is not None
        assert list(get_pending_redemptions()) == []

    def test_fulfill_twice(self, admin_account, funded_volunteer, reward):
        redemption = redeem_reward(user=funded_volunteer, reward_id=reward.id)
        fulfill_redemption(redemption_id=redemption.id, actor=admin_account)

        with pytest.raises(RedemptionAlreadyFulfilledError):
            fulfill_redemption(redemption_id=redemption.id, actor=admin_account)

    def test_unknown_redemption(self, admin_account):
        with pytest.raises(RedemptionNotFoundError):
            fulfill_redemption(redemption_id=uuid.uuid4(), actor=admin_account)

    def test_requires_admin(self, funded_volunteer, reward):
        redemption = redeem_reward(user=funded_volunteer, reward_id=reward.id)

        with pytest.raises(UnauthorizedError):
            fulfill_redemption(redemption_id=redemption.id, actor=funded_volunteer)

    def test_user_redemptions(self, funded_volunteer, other_volunteer, reward):
        redemption = redeem_reward(user=funded_volunteer, reward_id=reward.id)

        assert list(get_user_redemptions(funded_volunteer.id)) == [redemption]
        assert list(get_user_redemptions(other_volunteer.id)) == []


@pytest.mark.django_db
class TestRewardManagement:

    def test_create(self, admin_account):
        reward = create_reward(
            actor=admin_account,
            name='Native Plant Seedling',
            aina_bucks_cost=15,
        )

        assert reward.created_by == admin_account
        assert reward.is_unlimited
        assert reward.status == RewardStatus.ACTIVE

    def test_create_zero_cost(self, admin_account):
        with pytest.raises(InvalidInputError, match="aina_bucks_cost"):
            create_reward(actor=admin_account, name='Free', aina_bucks_cost=0)

    def test_create_requires_admin(self, volunteer):
        with pytest.raises(UnauthorizedError):
            create_reward(actor=volunteer, name='Mine', aina_bucks_cost=1)

    def test_update(self, admin_account, reward):
        updated = update_reward(reward_id=reward.id, actor=admin_account, aina_bucks_cost=45)
        assert updated.aina_bucks_cost == 45

    def test_stock_below_redeemed(self, admin_account, funded_volunteer, reward):
        redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=3)

        with pytest.raises(InvalidInputError):
            update_reward(reward_id=reward.id, actor=admin_account, quantity_available=2)

    def test_quantity_redeemed_not_editable(self, admin_account, reward):
        with pytest.raises(InvalidInputError):
            update_reward(reward_id=reward.id, actor=admin_account, quantity_redeemed=0)

    def test_delete_unused(self, admin_account, reward):
        assert delete_reward(reward_id=reward.id, actor=admin_account) is True
        assert not Reward.objects.filter(id=reward.id).exists()

    def test_delete_redeemed_archives(self, admin_account, funded_volunteer, reward):
        redeem_reward(user=funded_volunteer, reward_id=reward.id)

        assert delete_reward(reward_id=reward.id, actor=admin_account) is False
        reward.refresh_from_db()
        assert reward.status == RewardStatus.ARCHIVED
        assert reward not in get_active_rewards()

    def test_active_rewards_cheapest_first(self, make_reward):
        pricey = make_reward(name='Hoodie', aina_bucks_cost=200)
        cheap = make_reward(name='Sticker', aina_bucks_cost=5)
        make_reward(name='Hidden', status=RewardStatus.INACTIVE)

        assert list(get_active_rewards()) == [cheap, pricey]
