import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Act",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("genre", models.CharField(max_length=50)),
                ("standard_fee", models.PositiveIntegerField()),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Venue",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("hire_cost", models.PositiveIntegerField()),
                ("capacity", models.PositiveIntegerField()),
            ],
            options={
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("capacity__gt", 0)), name="venue_capacity_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Gig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=100)),
                ("start", models.DateTimeField()),
                ("status", models.CharField(choices=[("G", "Scheduled"), ("C", "Cancelled")], default="G", max_length=1)),
                ("venue", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="gigs", to="gigs.venue")),
            ],
            options={
                "ordering": ["start"],
                "indexes": [models.Index(fields=["venue", "start"], name="gig_venue_start_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("status__in", ["G", "C"])), name="gig_status_valid"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Performance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fee", models.PositiveIntegerField()),
                ("start", models.DateTimeField()),
                ("duration", models.PositiveIntegerField(help_text="Minutes on stage")),
                ("act", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="performances", to="gigs.act")),
                ("gig", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="performances", to="gigs.gig")),
            ],
            options={
                "ordering": ["start"],
                "indexes": [models.Index(fields=["gig", "start"], name="performance_gig_start_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("act", "gig", "start"), name="performance_unique_slot"),
                    models.CheckConstraint(condition=models.Q(("duration__gt", 0)), name="performance_duration_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TicketPrice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("price_type", models.CharField(default="A", max_length=2)),
                ("price", models.PositiveIntegerField()),
                ("gig", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="prices", to="gigs.gig")),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("gig", "price_type"), name="ticket_price_unique_type"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=100)),
                ("customer_email", models.CharField(max_length=100)),
                ("price_type", models.CharField(max_length=2)),
                ("cost", models.PositiveIntegerField()),
                ("gig", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="tickets", to="gigs.gig")),
            ],
        ),
    ]
