from django.contrib import admin

from events.models import Event, Participant


class ParticipantInline(admin.TabularInline):
    model = Participant
    extra = 0
    fields = ["type", "first_name", "last_name", "company_name", "payment_method"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "event_date", "created_at"]
    search_fields = ["name", "location"]
    inlines = [ParticipantInline]


@admin.register(Participant)
class ParticipantAdmin(admin.ModelAdmin):
    list_display = ["__str__", "event", "type", "payment_method", "created_at"]
    list_filter = ["type", "payment_method", "event"]
    search_fields = ["first_name", "last_name", "company_name", "registration_code"]
