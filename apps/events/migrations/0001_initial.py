# Generated manually for the events app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, RegexValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('category', models.CharField(db_index=True, max_length=100)),
                ('description', models.TextField()),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('date', models.DateField()),
                ('start_time', models.TimeField()),
                ('end_time', models.TimeField()),
                ('location_name', models.CharField(max_length=255)),
                ('address', models.CharField(max_length=255)),
                ('city', models.CharField(max_length=100)),
                ('state', models.CharField(max_length=2, validators=[RegexValidator('^[A-Z]{2}$', 'Use a 2-letter state code.')])),
                ('zip_code', models.CharField(max_length=10)),
                ('volunteers_needed', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('duration', models.DecimalField(decimal_places=2, max_digits=4, validators=[MinValueValidator(Decimal('0.01'))])),
                ('aina_bucks', models.PositiveIntegerField()),
                ('bucks_per_hour', models.PositiveIntegerField()),
                ('what_to_bring', models.JSONField(blank=True, default=list)),
                ('requirements', models.JSONField(blank=True, default=list)),
                ('coordinator_name', models.CharField(max_length=255)),
                ('coordinator_email', models.EmailField(max_length=255)),
                ('coordinator_phone', models.CharField(max_length=50)),
                ('check_in_token', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('check_out_token', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'events',
                'ordering': ['date', 'start_time'],
                'indexes': [
                    models.Index(fields=['date', 'start_time'], name='events_date_start_idx'),
                ],
            },
        ),
    ]
