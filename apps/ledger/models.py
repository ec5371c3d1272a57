import uuid

from django.db import models


class TransactionType(models.TextChoices):
    EARNED = 'EARNED', 'Earned'  # award for attending an event
    REDEEMED = 'REDEEMED', 'Redeemed'  # spent on rewards
    ADJUSTED = 'ADJUSTED', 'Adjusted'  # manual correction by an admin


class AinaBucksTransaction(models.Model):
    """
    Append-only ledger of ʻĀina Bucks movements.

    ``amount`` is signed: positive for EARNED, negative for REDEEMED, either
    for ADJUSTED. The sum of a user's amounts is their current balance.
    Rows are never updated; corrections are new ADJUSTED entries.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='aina_bucks_transactions',
    )
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='aina_bucks_transactions',
    )
    # At most one award per attendance
    attendance = models.OneToOneField(
        'attendance.Attendance',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='award_transaction',
    )

    type = models.CharField(max_length=10, choices=TransactionType.choices)
    amount = models.IntegerField()
    hours_worked = models.DecimalField(max_digits=4, decimal_places=2, null=True, blank=True)
    description = models.TextField()

    approved_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='approved_transactions',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'aina_bucks_transactions'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='ledger_user_created_idx'),
            models.Index(fields=['type'], name='ledger_type_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.type} {self.amount:+d} for {self.user}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError('Ledger entries are append-only')
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError('Ledger entries are append-only')
