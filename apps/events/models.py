from decimal import Decimal
import uuid

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


class Event(models.Model):
    """
    Volunteer event.

    ``check_in_token`` and ``check_out_token`` are random, bound at creation
    and never rotated. They are only handed out through the admin QR code
    endpoint and never appear in the public catalog.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Basic information
    title = models.CharField(max_length=255)
    category = models.CharField(max_length=100, db_index=True)
    description = models.TextField()
    image_url = models.URLField(max_length=500, blank=True)

    # Date & time
    date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()

    # Location
    location_name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(
        max_length=2,
        validators=[RegexValidator(r'^[A-Z]{2}$', 'Use a 2-letter state code.')],
    )
    zip_code = models.CharField(max_length=10)

    # Volunteers & rewards
    volunteers_needed = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    duration = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    aina_bucks = models.PositiveIntegerField()  # advertised total, informational
    bucks_per_hour = models.PositiveIntegerField()

    what_to_bring = models.JSONField(default=list, blank=True)
    requirements = models.JSONField(default=list, blank=True)

    # Coordinator
    coordinator_name = models.CharField(max_length=255)
    coordinator_email = models.EmailField(max_length=255)
    coordinator_phone = models.CharField(max_length=50)

    # QR tokens
    check_in_token = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    check_out_token = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_events',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events'
        indexes = [
            models.Index(fields=['date', 'start_time'], name='events_date_start_idx'),
        ]
        ordering = ['date', 'start_time']

    def __str__(self):
        return f"{self.title} ({self.date})"
