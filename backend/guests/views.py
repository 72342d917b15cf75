import logging
from django.db.models import Count, Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from backend.core.repository import OwnedRepository
from backend.core.resources import owned_resource_views
from backend.core.utils import validation_error_response, error_response
from .filters import GuestFilter
from .importers import parse_guest_list
from .models import Guest
from .serializers import GuestSerializer, GuestImportSerializer

logger = logging.getLogger('backend.guests')

guest_repository = OwnedRepository(Guest, ordering=['created_at'])

guest_list_create, guest_detail = owned_resource_views(
    'Guest', guest_repository, GuestSerializer, filterset_class=GuestFilter,
)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def guest_import(request):
    """Create guests from pasted text, one guest per line"""
    serializer = GuestImportSerializer(data=request.data)
    if not serializer.is_valid():
        return validation_error_response(serializer.errors)

    payloads = parse_guest_list(serializer.validated_data['text'])
    if not payloads:
        return error_response('No guests found in pasted text', status.HTTP_400_BAD_REQUEST)

    guests = GuestSerializer(data=payloads, many=True, context={'request': request})
    if not guests.is_valid():
        logger.warning(f"Guest import validation failed for {request.user.username}: {guests.errors}")
        return validation_error_response(guests.errors)

    records = guest_repository.create_many(request.user, guests.validated_data)
    logger.info(f"User {request.user.username} imported {len(records)} guests")
    return Response(GuestSerializer(records, many=True).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def guest_summary(request):
    """Headcount totals: invited counts plus-ones, the rest count guests by RSVP"""
    totals = guest_repository.list_for_owner(request.user).aggregate(
        guests=Count('id'),
        plus_ones=Count('id', filter=Q(plus_one=True)),
        attending=Count('id', filter=Q(rsvp='attending')),
        declined=Count('id', filter=Q(rsvp='declined')),
        pending=Count('id', filter=Q(rsvp='pending')),
    )
    return Response({
        'invited': totals['guests'] + totals['plus_ones'],
        'attending': totals['attending'],
        'declined': totals['declined'],
        'pending': totals['pending'],
    })
