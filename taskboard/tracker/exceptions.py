# ============================================
# tracker/exceptions.py
# ============================================
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler


def exception_handler(exc, context):
    """
    DRF handler that also understands Django's ValidationError.

    Services raise django.core.exceptions errors; DRF already maps
    PermissionDenied to 403 and Http404 to 404, this adds 400 for
    ValidationError.
    """
    if isinstance(exc, DjangoValidationError):
        return Response(
            {'detail': ' '.join(exc.messages)},
            status=status.HTTP_400_BAD_REQUEST
        )
    return drf_exception_handler(exc, context)
