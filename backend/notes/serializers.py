from rest_framework import serializers
from backend.core.serializers import OwnedRecordSerializer
from .models import Note


class NoteSerializer(OwnedRecordSerializer):
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    updatedAt = serializers.DateTimeField(source='updated_at', required=False)

    class Meta:
        model = Note
        fields = ['id', 'ownerId', 'title', 'content', 'tags', 'createdAt', 'updatedAt']
        read_only_fields = ['id']

    def validate_tags(self, value):
        # Tags behave as a set; keep first occurrence order
        return list(dict.fromkeys(value))

    def validate(self, attrs):
        # Creation always stamps its own update time
        if not self.partial:
            attrs.pop('updated_at', None)
        return attrs
