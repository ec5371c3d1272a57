from django.core.validators import MinValueValidator
from django.db import models
import uuid


class RewardStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    INACTIVE = 'INACTIVE', 'Inactive'
    ARCHIVED = 'ARCHIVED', 'Archived'


class RedemptionStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    FULFILLED = 'FULFILLED', 'Fulfilled'


class Reward(models.Model):
    """Item volunteers can redeem with ʻĀina Bucks."""

    UNLIMITED = -1

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    aina_bucks_cost = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    quantity_available = models.IntegerField(
        default=UNLIMITED,
        validators=[MinValueValidator(UNLIMITED)],
    )
    quantity_redeemed = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=10,
        choices=RewardStatus.choices,
        default=RewardStatus.ACTIVE,
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_rewards',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rewards'
        indexes = [
            models.Index(fields=['status', 'aina_bucks_cost'], name='rewards_status_cost_idx'),
        ]
        ordering = ['aina_bucks_cost', 'name']

    def __str__(self):
        return f"{self.name} ({self.aina_bucks_cost})"

    @property
    def is_unlimited(self):
        return self.quantity_available == self.UNLIMITED

    @property
    def quantity_remaining(self):
        """Units left, None when unlimited."""
        if self.is_unlimited:
            return None
        return max(self.quantity_available - self.quantity_redeemed, 0)


class RewardRedemption(models.Model):
    """A volunteer's claim on a reward, paid for by a REDEEMED ledger entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='redemptions',
    )
    reward = models.ForeignKey(
        Reward,
        on_delete=models.PROTECT,
        related_name='redemptions',
    )
    transaction = models.OneToOneField(
        'ledger.AinaBucksTransaction',
        on_delete=models.CASCADE,
        related_name='redemption',
    )
    aina_bucks_spent = models.PositiveIntegerField()
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    status = models.CharField(
        max_length=10,
        choices=RedemptionStatus.choices,
        default=RedemptionStatus.PENDING,
    )
    fulfilled_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='fulfilled_redemptions',
    )
    fulfilled_at = models.DateTimeField(null=True, blank=True)
    admin_notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'reward_redemptions'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='redemption_user_created_idx'),
            models.Index(fields=['status'], name='redemption_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.reward.name} x{self.quantity}"
