import uuid

from django.db import models
from django.db.models import Q


class RegistrationStatus(models.TextChoices):
    REGISTERED = 'REGISTERED', 'Registered'
    ATTENDED = 'ATTENDED', 'Attended'
    NO_SHOW = 'NO_SHOW', 'No show'
    CANCELLED = 'CANCELLED', 'Cancelled'


class Registration(models.Model):
    """
    A volunteer's sign-up for an event.

    Only one REGISTERED row may exist per (user, event); cancelled and
    closed rows are kept as history, so a volunteer can register again
    after cancelling.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='registrations',
    )
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='registrations',
    )
    status = models.CharField(
        max_length=20,
        choices=RegistrationStatus.choices,
        default=RegistrationStatus.REGISTERED,
    )
    registered_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'event_registrations'
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'event'],
                condition=Q(status='REGISTERED'),
                name='unique_active_registration',
            ),
        ]
        indexes = [
            models.Index(fields=['event', 'status'], name='registration_event_status_idx'),
            models.Index(fields=['user', 'status'], name='registration_user_status_idx'),
        ]
        ordering = ['registered_at']

    def __str__(self):
        return f"{self.user} - {self.event} ({self.status})"
