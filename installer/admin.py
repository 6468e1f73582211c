from django.contrib import admin

from installer.models import SetupState, StateEntry


@admin.register(SetupState)
class SetupStateAdmin(admin.ModelAdmin):
    list_display = ("id", "current_step", "is_completed", "completed_at", "staging_directory", "updated_at")
    readonly_fields = ("created_at", "updated_at")


@admin.register(StateEntry)
class StateEntryAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "updated_at")
    search_fields = ("key",)
