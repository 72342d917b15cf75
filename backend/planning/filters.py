import django_filters
from .models import PlanningTask


class PlanningTaskFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=PlanningTask.STATUS_CHOICES)
    assignee = django_filters.ChoiceFilter(choices=PlanningTask.ASSIGNEE_CHOICES)
    category = django_filters.CharFilter(lookup_expr='iexact')

    class Meta:
        model = PlanningTask
        fields = ['status', 'assignee', 'category']
