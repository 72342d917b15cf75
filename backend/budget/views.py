import logging
from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.core.repository import OwnedRepository, SingletonRepository
from backend.core.resources import owned_resource_views
from backend.core.utils import validation_error_response
from .filters import BudgetItemFilter
from .models import Budget, BudgetCategory, BudgetItem
from .serializers import BudgetSerializer, BudgetCategorySerializer, BudgetItemSerializer
from .summary import summarize_budget

logger = logging.getLogger('backend.budget')

budget_repository = SingletonRepository(Budget, 'total_budget')
budget_category_repository = OwnedRepository(BudgetCategory, ordering=['sort_order', 'created_at'])
budget_item_repository = OwnedRepository(BudgetItem, ordering=['created_at'])

budget_category_list_create, budget_category_detail = owned_resource_views(
    'Category', budget_category_repository, BudgetCategorySerializer, allow_bulk=True,
)
budget_item_list_create, budget_item_detail = owned_resource_views(
    'Budget item', budget_item_repository, BudgetItemSerializer, filterset_class=BudgetItemFilter,
)


def current_total_budget(owner):
    budget = budget_repository.get(owner)
    if budget is None:
        return settings.DEFAULT_TOTAL_BUDGET
    return budget.total_budget


@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def budget_detail(request):
    """
    GET returns the user's budget, or the default total when none is stored.
    PUT creates the budget on first call and updates the same record afterwards.
    """
    if request.method == 'GET':
        budget = budget_repository.get(request.user)
        if budget is None:
            return Response({'totalBudget': settings.DEFAULT_TOTAL_BUDGET})
        return Response(BudgetSerializer(budget).data)

    serializer = BudgetSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Budget validation failed for {request.user.username}: {serializer.errors}")
        return validation_error_response(serializer.errors)

    budget = budget_repository.upsert(request.user, serializer.validated_data['total_budget'])
    logger.info(f"User {request.user.username} set total budget to {budget.total_budget}")
    return Response(BudgetSerializer(budget).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def budget_summary(request):
    """Total, allocated, committed, paid and remaining amounts with per-category status"""
    categories = list(budget_category_repository.list_for_owner(request.user))
    items = list(budget_item_repository.list_for_owner(request.user))
    return Response(summarize_budget(current_total_budget(request.user), categories, items))
