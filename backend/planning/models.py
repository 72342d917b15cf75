from django.db import models
from backend.core.models import OwnedModel


class Milestone(OwnedModel):
    """Checklist entries grouped by how far out from the wedding they fall"""
    label = models.CharField(max_length=255)
    timeframe = models.CharField(max_length=50)
    done = models.BooleanField(default=False)
    target_date = models.CharField(max_length=50, null=True, blank=True)
    sort_order = models.IntegerField(default=0)

    def __str__(self):
        return self.label

    class Meta:
        db_table = 'milestones'


class PlanningTask(OwnedModel):
    """Ad-hoc tasks assigned to one of the people doing the planning"""
    ASSIGNEE_CHOICES = [
        ('self', 'Me'),
        ('partner', 'Partner'),
        ('planner', 'Planner'),
    ]
    STATUS_CHOICES = [
        ('not_started', 'Not Started'),
        ('in_progress', 'In Progress'),
        ('done', 'Done'),
    ]

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100, default='General')
    due_date = models.CharField(max_length=50, blank=True, default='')
    assignee = models.CharField(max_length=20, choices=ASSIGNEE_CHOICES, default='self')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='not_started')

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'planning_tasks'


class Payment(OwnedModel):
    """Payment timeline entries; date and amount are kept as entered"""
    date = models.CharField(max_length=50)
    label = models.CharField(max_length=255)
    amount = models.CharField(max_length=50)
    paid = models.BooleanField(default=False)
    sort_order = models.IntegerField(default=0)

    def __str__(self):
        return f"{self.label} ({self.amount})"

    class Meta:
        db_table = 'payments'
