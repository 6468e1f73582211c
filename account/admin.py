from django.contrib import admin
from .models import UserProfile

@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "timezone", "init")
    search_fields = ("user__username", "user__email", "init")
    list_filter = ("timezone",)
