from rest_framework import serializers
from backend.core.serializers import OwnedRecordSerializer
from .models import Guest


class GuestSerializer(OwnedRecordSerializer):
    plusOne = serializers.BooleanField(source='plus_one', required=False)
    table = serializers.CharField(source='table_assignment', max_length=100, required=False, allow_blank=True)

    class Meta:
        model = Guest
        fields = ['id', 'ownerId', 'name', 'plusOne', 'rsvp', 'dietary', 'table', 'side', 'notes', 'createdAt']
        read_only_fields = ['id']


class GuestImportSerializer(serializers.Serializer):
    text = serializers.CharField(trim_whitespace=False)
