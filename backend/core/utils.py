"""Response helpers shared by every API view"""
from rest_framework import status
from rest_framework.response import Response


def first_error(detail, path=()):
    """
    Walk a DRF error structure and return ``(path, message)`` for the first
    reported problem, or ``None`` when the structure is empty.

    Handles field dicts, lists of messages and the list-of-dicts shape
    produced by ``many=True`` serializers.
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            found = first_error(value, path + (key,))
            if found:
                return found
    elif isinstance(detail, (list, tuple)):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list, tuple)):
                found = first_error(value, path + (index,))
                if found:
                    return found
            elif value:
                return path, str(value)
    elif detail:
        return path, str(detail)
    return None


def describe_field(path):
    parts = [str(part) for part in path if part != 'non_field_errors']
    return '.'.join(parts) or None


def validation_error_response(errors):
    """400 response carrying the first validation message and the full error map"""
    found = first_error(errors)
    if found is None:
        return error_response('Invalid request', status.HTTP_400_BAD_REQUEST)
    path, message = found
    body = {'message': message, 'errors': errors}
    field = describe_field(path)
    if field:
        body['field'] = field
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


def error_response(message, status_code):
    return Response({'message': message}, status=status_code)


def not_found_response(label):
    return error_response(f'{label} not found', status.HTTP_404_NOT_FOUND)


def form_error_map(errors):
    """Plain ``{field: [messages]}`` from a Django form/filterset ``ErrorDict``"""
    return {
        field: [error['message'] for error in messages]
        for field, messages in errors.get_json_data().items()
    }
