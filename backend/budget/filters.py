import django_filters
from .models import BudgetItem


class BudgetItemFilter(django_filters.FilterSet):
    categoryId = django_filters.CharFilter(field_name='category_id')

    class Meta:
        model = BudgetItem
        fields = ['categoryId']
