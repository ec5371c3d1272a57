"""
Tests for ledger services.

Append-only entries, admin balance adjustments and reconciliation of the
User aggregates with the ledger.
"""

import uuid
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from apps.accounts.models import User
from apps.accounts.services import UserNotFoundError, get_profile_summary
from apps.attendance.services import award_aina_bucks
from apps.common.exceptions import InvalidInputError, UnauthenticatedError, UnauthorizedError
from apps.ledger.models import AinaBucksTransaction, TransactionType
from apps.ledger.services import (
    InsufficientBalanceError,
    adjust_balance,
    audit_balances,
    compute_ledger_totals,
    get_user_transactions,
    reconcile_user_balance,
    repair_user_balance,
)
from apps.rewards.services import redeem_reward


@pytest.mark.django_db
class TestAppendOnlyLedger:

    def test_entries_cannot_be_updated(self, funded_volunteer):
        entry = AinaBucksTransaction.objects.get(user=funded_volunteer)
        entry.amount = 1000

        with pytest.raises(ValueError, match="append-only"):
            entry.save()

        assert AinaBucksTransaction.objects.get(id=entry.id).amount == 100

    def test_entries_cannot_be_deleted(self, funded_volunteer):
        entry = AinaBucksTransaction.objects.get(user=funded_volunteer)

        with pytest.raises(ValueError, match="append-only"):
            entry.delete()

        assert AinaBucksTransaction.objects.filter(id=entry.id).exists()

    def test_history_newest_first(self, funded_volunteer, admin_account):
        adjust_balance(
            user_id=funded_volunteer.id,
            amount=5,
            description='Bonus',
            actor=admin_account,
        )

        types = [t.type for t in get_user_transactions(funded_volunteer.id)]

        assert types == [TransactionType.ADJUSTED, TransactionType.EARNED]


@pytest.mark.django_db
class TestAdjustBalance:

    def test_credit(self, funded_volunteer, admin_account):
        entry = adjust_balance(
            user_id=funded_volunteer.id,
            amount=25,
            description='  Makeup for missed award  ',
            actor=admin_account,
        )

        assert entry.type == TransactionType.ADJUSTED
        assert entry.amount == 25
        assert entry.description == 'Makeup for missed award'
        assert entry.approved_by == admin_account

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 125
        # Lifetime totals track EARNED / REDEEMED only
        assert funded_volunteer.total_aina_bucks_earned == 100
        assert funded_volunteer.total_aina_bucks_redeemed == 0

    def test_debit(self, funded_volunteer, admin_account):
        adjust_balance(
            user_id=funded_volunteer.id,
            amount=-40,
            description='Duplicate award correction',
            actor=admin_account,
        )

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 60

    def test_debit_below_zero(self, funded_volunteer, admin_account):
        with pytest.raises(InsufficientBalanceError):
            adjust_balance(
                user_id=funded_volunteer.id,
                amount=-101,
                description='Too much',
                actor=admin_account,
            )

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 100
        assert AinaBucksTransaction.objects.filter(type=TransactionType.ADJUSTED).count() == 0

    @pytest.mark.parametrize('amount', [0, True, 2.5, '10'])
    def test_invalid_amount(self, volunteer, admin_account, amount):
        with pytest.raises(InvalidInputError):
            adjust_balance(user_id=volunteer.id, amount=amount, description='x', actor=admin_account)

    def test_blank_description(self, volunteer, admin_account):
        with pytest.raises(InvalidInputError):
            adjust_balance(user_id=volunteer.id, amount=5, description='   ', actor=admin_account)

    def test_unknown_user(self, admin_account):
        with pytest.raises(UserNotFoundError):
            adjust_balance(user_id=uuid.uuid4(), amount=5, description='Gift', actor=admin_account)

    def test_requires_admin(self, volunteer, other_volunteer):
        with pytest.raises(UnauthorizedError):
            adjust_balance(user_id=other_volunteer.id, amount=500, description='Gift', actor=volunteer)

    def test_invalidates_profile(self, funded_volunteer, admin_account, django_capture_on_commit_callbacks):
        assert get_profile_summary(funded_volunteer)['current_aina_bucks'] == 100

        with django_capture_on_commit_callbacks(execute=True):
            adjust_balance(
                user_id=funded_volunteer.id,
                amount=10,
                description='Bonus',
                actor=admin_account,
            )

        assert get_profile_summary(funded_volunteer)['current_aina_bucks'] == 110


@pytest.mark.django_db
class TestReconciliation:

    def test_totals_from_ledger(self, admin_account, funded_volunteer, attendance, reward):
        award_aina_bucks(attendance_id=attendance.id, hours_worked='2.5', actor=admin_account)
        redeem_reward(user=funded_volunteer, reward_id=reward.id, quantity=2)
        adjust_balance(
            user_id=funded_volunteer.id,
            amount=-8,
            description='Correction',
            actor=admin_account,
        )

        totals = compute_ledger_totals(funded_volunteer.id)

        assert totals == {
            'current_aina_bucks': 100 + 38 - 60 - 8,
            'total_aina_bucks_earned': 138,
            'total_aina_bucks_redeemed': 60,
            'total_hours_volunteered': Decimal('7.50'),
        }

    def test_services_keep_aggregates_consistent(self, admin_account, funded_volunteer, attendance, reward):
        award_aina_bucks(attendance_id=attendance.id, hours_worked=4, actor=admin_account)
        redeem_reward(user=funded_volunteer, reward_id=reward.id)
        adjust_balance(user_id=funded_volunteer.id, amount=3, description='Bonus', actor=admin_account)

        report = reconcile_user_balance(user_id=funded_volunteer.id)

        assert report['drift'] == []
        assert report['repaired'] is False

    def test_no_entries(self, volunteer):
        report = reconcile_user_balance(user_id=volunteer.id)

        assert report['expected'] == {
            'current_aina_bucks': 0,
            'total_aina_bucks_earned': 0,
            'total_aina_bucks_redeemed': 0,
            'total_hours_volunteered': Decimal('0.00'),
        }
        assert report['drift'] == []

    def test_detects_drift(self, funded_volunteer):
        User.objects.filter(id=funded_volunteer.id).update(current_aina_bucks=500)

        report = reconcile_user_balance(user_id=funded_volunteer.id)

        assert report['drift'] == ['current_aina_bucks']
        assert report['stored']['current_aina_bucks'] == 500
        assert report['expected']['current_aina_bucks'] == 100
        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 500

    def test_repairs_drift(self, admin_account, funded_volunteer):
        User.objects.filter(id=funded_volunteer.id).update(
            current_aina_bucks=0,
            total_hours_volunteered=Decimal('1.00'),
        )

        report = repair_user_balance(user_id=funded_volunteer.id, actor=admin_account)

        assert report['repaired'] is True
        assert report['drift'] == ['current_aina_bucks', 'total_hours_volunteered']
        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 100
        assert funded_volunteer.total_hours_volunteered == Decimal('5.00')

    def test_volunteer_cannot_repair(self, funded_volunteer, other_volunteer):
        User.objects.filter(id=funded_volunteer.id).update(current_aina_bucks=0)

        with pytest.raises(UnauthorizedError):
            repair_user_balance(user_id=funded_volunteer.id, actor=other_volunteer)

        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 0

    def test_repair_requires_actor(self, funded_volunteer):
        with pytest.raises(UnauthenticatedError):
            repair_user_balance(user_id=funded_volunteer.id, actor=None)

    def test_unknown_user(self, db):
        with pytest.raises(UserNotFoundError):
            reconcile_user_balance(user_id=uuid.uuid4())

    def test_audit_reports_only_drifted_users(self, funded_volunteer, other_volunteer):
        User.objects.filter(id=other_volunteer.id).update(total_aina_bucks_earned=7)

        reports = audit_balances()

        assert [r['user_id'] for r in reports] == [str(other_volunteer.id)]


@pytest.mark.django_db
class TestAuditBalancesCommand:

    def test_clean(self, funded_volunteer):
        out = StringIO()
        call_command('audit_balances', stdout=out)

        assert 'All balances match the ledger.' in out.getvalue()

    def test_reports_without_fixing(self, funded_volunteer):
        User.objects.filter(id=funded_volunteer.id).update(current_aina_bucks=3)
        out = StringIO()

        call_command('audit_balances', stdout=out)

        assert 'current_aina_bucks: stored 3, ledger 100' in out.getvalue()
        assert 'Run with --fix to repair.' in out.getvalue()
        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 3

    def test_fix(self, funded_volunteer):
        User.objects.filter(id=funded_volunteer.id).update(current_aina_bucks=3)
        out = StringIO()

        call_command('audit_balances', '--fix', stdout=out)

        assert 'Repaired 1 user(s).' in out.getvalue()
        funded_volunteer.refresh_from_db()
        assert funded_volunteer.current_aina_bucks == 100
