from django.db import models
from backend.core.models import OwnedModel


class Vendor(OwnedModel):
    """Vendors being researched or booked, one row per service category"""
    STATUS_CHOICES = [
        ('searching', 'Searching'),
        ('contacted', 'Contacted'),
        ('quoted', 'Quoted'),
        ('booked', 'Booked'),
    ]

    category = models.CharField(max_length=100)
    vendor_name = models.CharField(max_length=200, blank=True, default='')
    contact_name = models.CharField(max_length=200, blank=True, default='')
    email = models.CharField(max_length=254, blank=True, default='')
    phone = models.CharField(max_length=50, blank=True, default='')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='searching')
    # Amounts and due dates are kept as entered ("$1,500", "Mar 15")
    deposit_amount = models.CharField(max_length=50, blank=True, default='')
    deposit_due = models.CharField(max_length=50, blank=True, default='')
    final_amount = models.CharField(max_length=50, blank=True, default='')
    final_due = models.CharField(max_length=50, blank=True, default='')
    notes = models.TextField(blank=True, default='')

    def __str__(self):
        return self.vendor_name or self.category

    class Meta:
        db_table = 'vendors'
