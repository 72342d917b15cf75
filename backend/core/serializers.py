from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

User = get_user_model()


# Bounds of the 32-bit integer columns behind every integer field
MAX_INTEGER = 2147483647
MIN_INTEGER = -2147483648


class UserSerializer(serializers.ModelSerializer):
    dateJoined = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'dateJoined']
        read_only_fields = ['id', 'username']


class RegisterSerializer(serializers.Serializer):
    # Declared by hand so the duplicate-username check stays in the view
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(write_only=True, validators=[validate_password])

    def validate_username(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('This field may not be blank.')
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data['username'],
            password=validated_data['password'],
        )


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class OwnedRecordSerializer(serializers.ModelSerializer):
    """Base serializer for owner-scoped records: exposes owner and creation time read-only"""
    ownerId = serializers.ReadOnlyField(source='owner_id')
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)


class OwnedPrimaryKeyRelatedField(serializers.PrimaryKeyRelatedField):
    """
    Primary key reference restricted to records owned by the requesting user.

    Foreign and missing ids fail the same way so ownership cannot be probed.
    """

    def __init__(self, label_name=None, **kwargs):
        label_name = label_name or 'Record'
        error_messages = kwargs.pop('error_messages', {})
        error_messages.setdefault('does_not_exist', f'{label_name} not found')
        error_messages.setdefault('incorrect_type', f'{label_name} not found')
        super().__init__(error_messages=error_messages, **kwargs)

    def get_queryset(self):
        queryset = super().get_queryset()
        request = self.context.get('request')
        if request is None or not request.user.is_authenticated:
            return queryset.none()
        return queryset.filter(owner=request.user)
