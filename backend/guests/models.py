from django.db import models
from backend.core.models import OwnedModel


class Guest(OwnedModel):
    """Guest list entries"""
    RSVP_CHOICES = [
        ('pending', 'Pending'),
        ('attending', 'Attending'),
        ('declined', 'Declined'),
    ]
    SIDE_CHOICES = [
        ('partner1', 'Partner 1'),
        ('partner2', 'Partner 2'),
        ('both', 'Both'),
    ]

    name = models.CharField(max_length=200)
    plus_one = models.BooleanField(default=False)
    rsvp = models.CharField(max_length=20, choices=RSVP_CHOICES, default='pending')
    dietary = models.CharField(max_length=200, blank=True, default='')
    table_assignment = models.CharField(max_length=100, blank=True, default='')
    side = models.CharField(max_length=20, choices=SIDE_CHOICES, default='both')
    notes = models.TextField(blank=True, default='')

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'guests'
