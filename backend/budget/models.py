from django.conf import settings
from django.db import models
from django.utils import timezone
from backend.core.models import OwnedModel, generate_id


class Budget(models.Model):
    """Overall wedding budget; at most one per user"""
    id = models.CharField(max_length=36, primary_key=True, default=generate_id, editable=False)
    owner = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='budget')
    total_budget = models.PositiveIntegerField(default=65000)
    updated_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.owner} - {self.total_budget}"

    class Meta:
        db_table = 'budgets'


class BudgetCategory(OwnedModel):
    """Spending bucket with a target amount"""
    name = models.CharField(max_length=255)
    target = models.PositiveIntegerField(default=0)
    sort_order = models.IntegerField(default=0)

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'budget_categories'
        verbose_name_plural = 'budget categories'


class BudgetItem(OwnedModel):
    """Individual cost booked against a category"""
    category = models.ForeignKey(BudgetCategory, on_delete=models.CASCADE, related_name='items')
    name = models.CharField(max_length=255)
    cost = models.PositiveIntegerField(default=0)
    paid = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.name} ({self.category})"

    class Meta:
        db_table = 'budget_items'
