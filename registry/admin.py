from django.contrib import admin

from registry.models import EventRecord, UserRecord


@admin.register(UserRecord)
class UserRecordAdmin(admin.ModelAdmin):
    list_display = ["username", "role", "created_at"]
    search_fields = ["username"]


@admin.register(EventRecord)
class EventRecordAdmin(admin.ModelAdmin):
    list_display = ["name_of_event", "owner", "date", "capacity", "version"]
    list_filter = ["is_public"]
    search_fields = ["name_of_event", "owner", "location_of_event"]
