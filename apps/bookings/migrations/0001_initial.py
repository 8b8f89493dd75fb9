import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


STATUS_CHOICES = [
    ("pending", "Pending"),
    ("confirmed", "Confirmed"),
    ("completed", "Completed"),
    ("cancelled", "Cancelled"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("listings", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="LaborBooking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(choices=STATUS_CHOICES, db_index=True, default="pending", max_length=20),
                ),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("total_days", models.PositiveIntegerField()),
                (
                    "farmer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="laborbooking_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "laborer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="labor_jobs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "listing",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to="listings.laborlisting",
                    ),
                ),
            ],
            options={
                "verbose_name": "Labor booking",
                "verbose_name_plural": "Labor bookings",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["listing", "status"], name="labor_booking_listing_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(end_date__gte=models.F("start_date")),
                        name="labor_booking_dates_ordered",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="TractorBooking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("total_amount", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(choices=STATUS_CHOICES, db_index=True, default="pending", max_length=20),
                ),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("start_at", models.DateTimeField()),
                ("end_at", models.DateTimeField()),
                ("total_hours", models.PositiveIntegerField()),
                (
                    "farmer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tractorbooking_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tractor_rentals",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "listing",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to="listings.tractorlisting",
                    ),
                ),
            ],
            options={
                "verbose_name": "Tractor booking",
                "verbose_name_plural": "Tractor bookings",
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [models.Index(fields=["listing", "status"], name="tractor_booking_listing_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(end_at__gte=models.F("start_at")),
                        name="tractor_booking_times_ordered",
                    ),
                ],
            },
        ),
    ]
