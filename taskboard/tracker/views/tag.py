# ============================================
# tracker/views/tag.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.selectors.tag import TagSelector
from tracker.serializers.tag import TagCreateSerializer, TagOutputSerializer
from tracker.services.tag import TagService
from tracker.views.utils import MessageSerializer, std_errors


class TagListCreateAPIView(APIView):
    """
    GET: List all tags, by name
    POST: Create a tag, or return the existing one with that name

    Request body (POST):
    - name: string (required, 1-50 chars)
    """

    @extend_schema(tags=["Tags"], responses={200: TagOutputSerializer(many=True)})
    def get(self, request):
        serializer = TagOutputSerializer(TagSelector.get_tags_list(), many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Tags"],
        request=TagCreateSerializer,
        responses={201: TagOutputSerializer, **std_errors(400)},
    )
    def post(self, request):
        serializer = TagCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        tag = TagService.create_tag(**serializer.validated_data)

        return Response(TagOutputSerializer(tag).data, status=status.HTTP_201_CREATED)


class TagDetailAPIView(APIView):
    """
    DELETE: Delete a tag

    Path params:
    - tag_id: int
    """

    @extend_schema(tags=["Tags"], responses={200: MessageSerializer, **std_errors(403)})
    def delete(self, request, tag_id):
        return Response(TagService.delete_tag(tag_id=tag_id))
