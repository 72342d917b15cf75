from django.db import models
from django.utils import timezone
from backend.core.models import OwnedModel


class Note(OwnedModel):
    """Free-form planning notes"""
    title = models.CharField(max_length=255, blank=True, default='')
    content = models.TextField(blank=True, default='')
    tags = models.JSONField(default=list, blank=True)
    updated_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return self.title or f"Note-{self.pk}"

    class Meta:
        db_table = 'notes'
