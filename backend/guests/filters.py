import django_filters
from django.db.models import Q
from .models import Guest


class GuestFilter(django_filters.FilterSet):
    rsvp = django_filters.ChoiceFilter(choices=Guest.RSVP_CHOICES)
    side = django_filters.ChoiceFilter(choices=Guest.SIDE_CHOICES)
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = Guest
        fields = ['rsvp', 'side']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(table_assignment__icontains=value) |
            Q(notes__icontains=value)
        )
