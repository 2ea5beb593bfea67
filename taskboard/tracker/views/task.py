# ============================================
# tracker/views/task.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.selectors.project import ProjectSelector
from tracker.selectors.task import TaskSelector
from tracker.serializers.task import (
    TaskCreateSerializer,
    TaskFilterSerializer,
    TaskOutputSerializer,
    TaskProjectsFilterSerializer,
    TaskUpdateSerializer
)
from tracker.services.task import TaskService
from tracker.views.utils import MessageSerializer, q_int, q_str, std_errors


def _task_response(task_id, response_status=status.HTTP_200_OK):
    task = TaskSelector.get_task_by_id(task_id)
    return Response(TaskOutputSerializer(task).data, status=response_status)


class TaskListCreateAPIView(APIView):
    """
    GET: List tasks created by the current user
    POST: Create a new task

    Query params (GET):
    - project_id: int (optional)
    - status: TODO/IN_PROGRESS/DONE/BLOCKED (optional)
    - assignee_id: int (optional)

    Request body (POST):
    - title: string (required)
    - description: string (optional)
    - status: string (optional, default TODO)
    - priority: LOW/MEDIUM/HIGH/URGENT (optional, default MEDIUM)
    - deadline: ISO-8601 date-time or null (optional)
    - project_id: int (optional)
    - assignee_id: int (optional)
    - tag_ids: list of int (optional)
    - new_tag_name: string (optional, created when missing)
    """

    @extend_schema(
        tags=["Tasks"],
        parameters=[
            q_int("project_id", "Only tasks of this project"),
            q_str("status", "TODO | IN_PROGRESS | DONE | BLOCKED"),
            q_int("assignee_id", "Only tasks assigned to this user"),
        ],
        responses={200: TaskOutputSerializer(many=True), **std_errors(400)},
    )
    def get(self, request):
        filters = TaskFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)

        tasks = TaskSelector.get_tasks_list(
            creator_id=request.user.id,
            **filters.validated_data
        )

        serializer = TaskOutputSerializer(tasks, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Tasks"],
        request=TaskCreateSerializer,
        responses={201: TaskOutputSerializer, **std_errors(400)},
    )
    def post(self, request):
        serializer = TaskCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = TaskService.create_task(
            creator_id=request.user.id,
            **serializer.validated_data
        )

        return _task_response(task.id, status.HTTP_201_CREATED)


class TaskByProjectsAPIView(APIView):
    """
    GET: Every task of the given projects, whoever created them

    Query params:
    - project_ids: comma separated ids, or the parameter repeated
    """

    @staticmethod
    def _project_ids_param(request) -> list:
        raw = []
        for value in request.query_params.getlist('project_ids'):
            raw.extend(part.strip() for part in value.split(',') if part.strip())
        return raw

    @extend_schema(
        tags=["Tasks"],
        parameters=[q_str("project_ids", "Comma separated project ids", required=True)],
        responses={200: TaskOutputSerializer(many=True), **std_errors(400)},
    )
    def get(self, request):
        filters = TaskProjectsFilterSerializer(
            data={'project_ids': self._project_ids_param(request)}
        )
        filters.is_valid(raise_exception=True)

        project_ids = ProjectSelector.get_accessible_project_ids(
            request.user.id, filters.validated_data['project_ids']
        )
        tasks = TaskSelector.get_tasks_for_projects(project_ids)

        serializer = TaskOutputSerializer(tasks, many=True)
        return Response(serializer.data)


class TaskDetailAPIView(APIView):
    """
    GET: Retrieve task details
    PUT/PATCH: Update task (creator only)
    DELETE: Delete task (creator only)

    Path params:
    - task_id: int
    """

    @extend_schema(tags=["Tasks"], responses={200: TaskOutputSerializer, **std_errors(404)})
    def get(self, request, task_id):
        task = TaskSelector.get_task_by_id(task_id)

        if not task:
            return Response(
                {'error': 'Task not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = TaskOutputSerializer(task)
        return Response(serializer.data)

    @extend_schema(
        tags=["Tasks"],
        request=TaskUpdateSerializer,
        responses={200: TaskOutputSerializer, **std_errors(400, 403)},
    )
    def put(self, request, task_id):
        serializer = TaskUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        TaskService.update_task(
            task_id=task_id,
            user_id=request.user.id,
            **serializer.validated_data
        )

        return _task_response(task_id)

    @extend_schema(
        tags=["Tasks"],
        request=TaskUpdateSerializer,
        responses={200: TaskOutputSerializer, **std_errors(400, 403)},
    )
    def patch(self, request, task_id):
        return self.put(request, task_id)

    @extend_schema(tags=["Tasks"], responses={200: MessageSerializer, **std_errors(403)})
    def delete(self, request, task_id):
        result = TaskService.delete_task(
            task_id=task_id,
            user_id=request.user.id
        )
        return Response(result)
