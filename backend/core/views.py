import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response

from .serializers import UserSerializer, RegisterSerializer, LoginSerializer
from .utils import validation_error_response, error_response

User = get_user_model()

logger = logging.getLogger('backend.core')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    """Return the user attached to the session"""
    return Response(UserSerializer(request.user).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Create an account and start a session for it"""
    serializer = RegisterSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Registration validation failed: {serializer.errors}")
        return validation_error_response(serializer.errors)

    username = serializer.validated_data['username']
    if User.objects.filter(username=username).exists():
        logger.warning(f"Registration rejected, username '{username}' already taken")
        return error_response('Username already taken', status.HTTP_400_BAD_REQUEST)

    user = serializer.save()
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    logger.info(f"Registered user {user.username} ({user.pk})")
    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """Authenticate username/password and attach the user to the session"""
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return validation_error_response(serializer.errors)

    user = authenticate(
        request,
        username=serializer.validated_data['username'],
        password=serializer.validated_data['password'],
    )
    if user is None:
        logger.warning(f"Failed login for '{serializer.validated_data['username']}'")
        return error_response('Invalid username or password', status.HTTP_401_UNAUTHORIZED)

    login(request, user)
    logger.info(f"User {user.username} logged in")
    return Response(UserSerializer(user).data)


@api_view(['POST'])
@permission_classes([AllowAny])
def logout_view(request):
    """End the session; succeeds whether or not one exists"""
    if request.user.is_authenticated:
        logger.info(f"User {request.user.username} logged out")
    logout(request)
    return Response({'ok': True})
