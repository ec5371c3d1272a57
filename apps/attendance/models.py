import uuid

from django.db import models


class AttendanceStatus(models.TextChoices):
    CHECKED_IN = 'CHECKED_IN', 'Checked in'
    CHECKED_OUT = 'CHECKED_OUT', 'Checked out'
    INCOMPLETE = 'INCOMPLETE', 'Incomplete'  # checked in, never checked out


class Attendance(models.Model):
    """
    Check-in / check-out record of a volunteer at an event.

    One row per (user, event). ``hours_worked`` is only set when an admin
    awards ʻĀina Bucks; ``awarded`` marks that the award happened.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='attendance_records',
    )
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='attendance_records',
    )
    registration = models.ForeignKey(
        'registrations.Registration',
        on_delete=models.CASCADE,
        related_name='attendance_records',
    )

    check_in_time = models.DateTimeField(null=True, blank=True)
    check_out_time = models.DateTimeField(null=True, blank=True)
    hours_worked = models.DecimalField(max_digits=4, decimal_places=2, null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=AttendanceStatus.choices,
        default=AttendanceStatus.CHECKED_IN,
    )
    admin_notes = models.TextField(blank=True)

    # Award
    awarded = models.BooleanField(default=False)
    awarded_at = models.DateTimeField(null=True, blank=True)
    awarded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='awarded_attendance',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'event_attendance'
        constraints = [
            models.UniqueConstraint(fields=['user', 'event'], name='unique_event_attendance'),
        ]
        indexes = [
            models.Index(fields=['event', 'status'], name='attendance_event_status_idx'),
        ]
        ordering = ['check_in_time']

    def __str__(self):
        return f"{self.user} @ {self.event} ({self.status})"
