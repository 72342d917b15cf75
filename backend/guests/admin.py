from django.contrib import admin
from .models import Guest


@admin.register(Guest)
class GuestAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'rsvp', 'side', 'table_assignment', 'plus_one', 'created_at']
    list_filter = ['rsvp', 'side', 'plus_one']
    search_fields = ['name', 'owner__username', 'table_assignment']
    ordering = ['owner', 'created_at']
