# ============================================
# tracker/views/user.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.selectors.task import TaskSelector
from tracker.selectors.user import UserSelector
from tracker.serializers.task import TaskOutputSerializer
from tracker.serializers.user import UserProfileUpdateSerializer, UserSummarySerializer
from tracker.services.user import UserService
from tracker.views.utils import std_errors


class UserListAPIView(APIView):
    """
    GET: id, name and email of every user (assignee / member pickers)
    """

    @extend_schema(tags=["Users"], responses={200: UserSummarySerializer(many=True)})
    def get(self, request):
        serializer = UserSummarySerializer(UserSelector.get_users_list(), many=True)
        return Response(serializer.data)


class UserProfileAPIView(APIView):
    """
    GET: Current user's profile
    PATCH: Update the current user's display name

    Request body (PATCH):
    - name: string (optional)
    """

    @extend_schema(tags=["Users"], responses={200: UserSummarySerializer, **std_errors(404)})
    def get(self, request):
        user = UserService.get_profile(user_id=request.user.id)
        return Response(UserSummarySerializer(user).data)

    @extend_schema(
        tags=["Users"],
        request=UserProfileUpdateSerializer,
        responses={200: UserSummarySerializer, **std_errors(400, 404)},
    )
    def patch(self, request):
        serializer = UserProfileUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = UserService.update_profile(
            user_id=request.user.id,
            **serializer.validated_data
        )
        return Response(UserSummarySerializer(user).data)


class UserAssignedTasksAPIView(APIView):
    """
    GET: Tasks assigned to the current user
    """

    @extend_schema(tags=["Users"], responses={200: TaskOutputSerializer(many=True)})
    def get(self, request):
        tasks = TaskSelector.get_tasks_assigned_to(request.user.id)
        return Response(TaskOutputSerializer(tasks, many=True).data)
