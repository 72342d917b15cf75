"""
Function views for owner-scoped resources.

``owned_resource_views`` builds the list/create and detail views for one
entity from the repository and serializer handed to it, so every resource
gets identical ownership, validation and status-code handling.
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .utils import validation_error_response, not_found_response, error_response, form_error_map


def owned_resource_views(label, repository, serializer_class, allow_bulk=False, filterset_class=None):
    """
    Return ``(list_create, detail)`` views for ``repository``.

    ``label`` names the entity in 404 messages. ``allow_bulk`` lets POST take
    an array, created atomically. ``filterset_class`` is applied to GET lists.
    """
    logger = logging.getLogger(f'backend.{repository.model._meta.app_label}')

    @api_view(['GET', 'POST'])
    @permission_classes([IsAuthenticated])
    def list_create(request):
        if request.method == 'GET':
            queryset = repository.list_for_owner(request.user)
            if filterset_class is not None:
                filterset = filterset_class(request.query_params, queryset=queryset)
                if not filterset.is_valid():
                    logger.warning(f"Invalid {label} filters from {request.user.username}: {filterset.errors}")
                    return validation_error_response(form_error_map(filterset.errors))
                queryset = filterset.qs
            serializer = serializer_class(queryset, many=True)
            return Response(serializer.data)

        many = isinstance(request.data, list)
        if many and not allow_bulk:
            return error_response(f'{label} payload must be an object', status.HTTP_400_BAD_REQUEST)

        serializer = serializer_class(data=request.data, many=many, context={'request': request})
        if not serializer.is_valid():
            logger.warning(f"{label} create validation failed for {request.user.username}: {serializer.errors}")
            return validation_error_response(serializer.errors)

        if many:
            records = repository.create_many(request.user, serializer.validated_data)
            logger.info(f"User {request.user.username} created {len(records)} {label} records")
            return Response(serializer_class(records, many=True).data, status=status.HTTP_201_CREATED)

        record = repository.create(request.user, serializer.validated_data)
        logger.info(f"User {request.user.username} created {label} {record.pk}")
        return Response(serializer_class(record).data, status=status.HTTP_201_CREATED)

    @api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
    @permission_classes([IsAuthenticated])
    def detail(request, pk):
        if request.method == 'GET':
            record = repository.get_for_owner(pk, request.user)
            if record is None:
                return not_found_response(label)
            return Response(serializer_class(record).data)

        if request.method == 'DELETE':
            if not repository.delete(pk, request.user):
                logger.warning(f"User {request.user.username} tried to delete missing {label} {pk}")
                return not_found_response(label)
            logger.info(f"User {request.user.username} deleted {label} {pk}")
            return Response({'ok': True})

        # PUT and PATCH both merge the supplied fields into the stored record
        serializer = serializer_class(data=request.data, partial=True, context={'request': request})
        if not serializer.is_valid():
            logger.warning(f"{label} {pk} update validation failed: {serializer.errors}")
            return validation_error_response(serializer.errors)

        record = repository.update(pk, request.user, serializer.validated_data)
        if record is None:
            logger.warning(f"User {request.user.username} tried to update missing {label} {pk}")
            return not_found_response(label)
        logger.info(f"User {request.user.username} updated {label} {pk}")
        return Response(serializer_class(record).data)

    return list_create, detail
