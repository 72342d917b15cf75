import django_filters
from .models import Vendor


class VendorFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Vendor.STATUS_CHOICES)
    category = django_filters.CharFilter(lookup_expr='iexact')

    class Meta:
        model = Vendor
        fields = ['status', 'category']
