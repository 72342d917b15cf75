from rest_framework import serializers
from backend.core.serializers import OwnedRecordSerializer, MAX_INTEGER, MIN_INTEGER
from .models import Milestone, PlanningTask, Payment


class MilestoneSerializer(OwnedRecordSerializer):
    targetDate = serializers.CharField(source='target_date', max_length=50, required=False, allow_null=True, allow_blank=True)
    sortOrder = serializers.IntegerField(source='sort_order', min_value=MIN_INTEGER, max_value=MAX_INTEGER, required=False)

    class Meta:
        model = Milestone
        fields = ['id', 'ownerId', 'label', 'timeframe', 'done', 'targetDate', 'sortOrder', 'createdAt']
        read_only_fields = ['id']


class PlanningTaskSerializer(OwnedRecordSerializer):
    dueDate = serializers.CharField(source='due_date', max_length=50, required=False, allow_blank=True)

    class Meta:
        model = PlanningTask
        fields = ['id', 'ownerId', 'name', 'category', 'dueDate', 'assignee', 'status', 'createdAt']
        read_only_fields = ['id']


class PaymentSerializer(OwnedRecordSerializer):
    sortOrder = serializers.IntegerField(source='sort_order', min_value=MIN_INTEGER, max_value=MAX_INTEGER, required=False)

    class Meta:
        model = Payment
        fields = ['id', 'ownerId', 'date', 'label', 'amount', 'paid', 'sortOrder', 'createdAt']
        read_only_fields = ['id']
