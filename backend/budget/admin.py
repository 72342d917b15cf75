from django.contrib import admin
from .models import Budget, BudgetCategory, BudgetItem


@admin.register(Budget)
class BudgetAdmin(admin.ModelAdmin):
    list_display = ['owner', 'total_budget', 'updated_at']
    search_fields = ['owner__username']
    readonly_fields = ['updated_at']


class BudgetItemInline(admin.TabularInline):
    model = BudgetItem
    extra = 0
    fields = ['name', 'cost', 'paid']


@admin.register(BudgetCategory)
class BudgetCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'target', 'sort_order', 'created_at']
    search_fields = ['name', 'owner__username']
    ordering = ['owner', 'sort_order', 'created_at']
    inlines = [BudgetItemInline]


@admin.register(BudgetItem)
class BudgetItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'owner', 'cost', 'paid', 'created_at']
    list_filter = ['paid']
    search_fields = ['name', 'category__name', 'owner__username']
    ordering = ['owner', 'created_at']
