import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("location", models.CharField(max_length=200)),
                ("event_date", models.DateTimeField()),
                ("additional_info", models.TextField(blank=True, default="", max_length=1000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["event_date"], name="events_event_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="Participant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("individual", "Individual"), ("company", "Company")], max_length=20)),
                ("payment_method", models.CharField(choices=[("bank_transfer", "Bank transfer"), ("cash", "Cash")], max_length=20)),
                ("first_name", models.CharField(blank=True, default="", max_length=100)),
                ("last_name", models.CharField(blank=True, default="", max_length=100)),
                ("personal_code", models.CharField(blank=True, default="", max_length=11)),
                ("company_name", models.CharField(blank=True, default="", max_length=200)),
                ("registration_code", models.CharField(blank=True, default="", max_length=50)),
                ("number_of_participants", models.PositiveIntegerField(blank=True, null=True)),
                ("additional_info", models.TextField(blank=True, default="", max_length=5000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("event", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="participants", to="events.event")),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["event", "id"], name="events_participant_event_idx")],
            },
        ),
    ]
