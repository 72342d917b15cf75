from rest_framework import serializers
from backend.core.serializers import OwnedRecordSerializer
from .models import Vendor


class VendorSerializer(OwnedRecordSerializer):
    vendorName = serializers.CharField(source='vendor_name', max_length=200, required=False, allow_blank=True)
    contactName = serializers.CharField(source='contact_name', max_length=200, required=False, allow_blank=True)
    depositAmount = serializers.CharField(source='deposit_amount', max_length=50, required=False, allow_blank=True)
    depositDue = serializers.CharField(source='deposit_due', max_length=50, required=False, allow_blank=True)
    finalAmount = serializers.CharField(source='final_amount', max_length=50, required=False, allow_blank=True)
    finalDue = serializers.CharField(source='final_due', max_length=50, required=False, allow_blank=True)

    class Meta:
        model = Vendor
        fields = [
            'id', 'ownerId', 'category', 'vendorName', 'contactName', 'email', 'phone', 'status',
            'depositAmount', 'depositDue', 'finalAmount', 'finalDue', 'notes', 'createdAt'
        ]
        read_only_fields = ['id']
