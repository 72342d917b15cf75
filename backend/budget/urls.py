from django.urls import path
from .views import (
    budget_detail, budget_summary,
    budget_category_list_create, budget_category_detail,
    budget_item_list_create, budget_item_detail
)

urlpatterns = [
    # Overall budget endpoints
    path('budget', budget_detail, name='budget-detail'),
    path('budget/summary', budget_summary, name='budget-summary'),

    # Category endpoints
    path('budget/categories', budget_category_list_create, name='budget-category-list-create'),
    path('budget/categories/<str:pk>', budget_category_detail, name='budget-category-detail'),

    # Item endpoints
    path('budget/items', budget_item_list_create, name='budget-item-list-create'),
    path('budget/items/<str:pk>', budget_item_detail, name='budget-item-detail'),
]
