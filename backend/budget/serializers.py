from rest_framework import serializers
from backend.core.serializers import OwnedRecordSerializer, OwnedPrimaryKeyRelatedField, MAX_INTEGER, MIN_INTEGER
from .models import Budget, BudgetCategory, BudgetItem


class BudgetSerializer(serializers.ModelSerializer):
    ownerId = serializers.ReadOnlyField(source='owner_id')
    totalBudget = serializers.IntegerField(source='total_budget', min_value=0, max_value=MAX_INTEGER)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Budget
        fields = ['id', 'ownerId', 'totalBudget', 'updatedAt']
        read_only_fields = ['id']


class BudgetCategorySerializer(OwnedRecordSerializer):
    target = serializers.IntegerField(min_value=0, max_value=MAX_INTEGER, required=False)
    sortOrder = serializers.IntegerField(source='sort_order', min_value=MIN_INTEGER, max_value=MAX_INTEGER, required=False)

    class Meta:
        model = BudgetCategory
        fields = ['id', 'ownerId', 'name', 'target', 'sortOrder', 'createdAt']
        read_only_fields = ['id']


class BudgetItemSerializer(OwnedRecordSerializer):
    categoryId = OwnedPrimaryKeyRelatedField(
        source='category', queryset=BudgetCategory.objects.all(), label_name='Category',
    )
    cost = serializers.IntegerField(min_value=0, max_value=MAX_INTEGER, required=False)

    class Meta:
        model = BudgetItem
        fields = ['id', 'ownerId', 'categoryId', 'name', 'cost', 'paid', 'createdAt']
        read_only_fields = ['id']
