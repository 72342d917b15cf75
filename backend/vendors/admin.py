from django.contrib import admin
from .models import Vendor


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ['category', 'vendor_name', 'owner', 'status', 'deposit_amount', 'final_amount', 'created_at']
    list_filter = ['status', 'category']
    search_fields = ['vendor_name', 'contact_name', 'email', 'owner__username']
    ordering = ['owner', 'created_at']
