"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200)
    event_date = models.DateTimeField()
    additional_info = models.TextField(max_length=1000, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["event_date"], name="events_event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Participant(models.Model):
    """Persistence model for event participants."""

    class Type(models.TextChoices):
        INDIVIDUAL = "individual", "Individual"
        COMPANY = "company", "Company"

    class PaymentMethod(models.TextChoices):
        BANK_TRANSFER = "bank_transfer", "Bank transfer"
        CASH = "cash", "Cash"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="participants")
    type = models.CharField(max_length=20, choices=Type.choices)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)

    first_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    personal_code = models.CharField(max_length=11, blank=True, default="")

    company_name = models.CharField(max_length=200, blank=True, default="")
    registration_code = models.CharField(max_length=50, blank=True, default="")
    number_of_participants = models.PositiveIntegerField(null=True, blank=True)

    additional_info = models.TextField(max_length=5000, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["event", "id"], name="events_participant_event_idx"),
        ]

    def __str__(self) -> str:
        if self.type == self.Type.INDIVIDUAL:
            return f"{self.first_name} {self.last_name}"
        return self.company_name
