# ============================================
# tracker/views/utils.py
# ============================================
"""
Shared drf-spectacular helpers for the APIView classes.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from rest_framework import serializers

# ---- Reusable error / message schemas
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

MessageSerializer = inline_serializer(
    name="Message",
    fields={"message": serializers.CharField()}
)


# ---- Param helpers

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)


def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)


def std_errors(*codes: int):
    """Error response mapping for the given status codes"""
    labels = {
        400: "Bad Request",
        403: "Forbidden",
        404: "Not Found",
    }
    return {code: OpenApiResponse(ErrorSerializer, description=labels[code]) for code in codes}
