from django.contrib import admin
from .models import Milestone, PlanningTask, Payment


@admin.register(Milestone)
class MilestoneAdmin(admin.ModelAdmin):
    list_display = ['label', 'owner', 'timeframe', 'done', 'target_date', 'sort_order']
    list_filter = ['timeframe', 'done']
    search_fields = ['label', 'owner__username']
    ordering = ['owner', 'sort_order']


@admin.register(PlanningTask)
class PlanningTaskAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'category', 'assignee', 'status', 'due_date', 'created_at']
    list_filter = ['status', 'assignee', 'category']
    search_fields = ['name', 'owner__username']
    ordering = ['owner', 'created_at']


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['label', 'owner', 'date', 'amount', 'paid', 'sort_order']
    list_filter = ['paid']
    search_fields = ['label', 'owner__username']
    ordering = ['owner', 'sort_order', 'created_at']
