# ============================================
# tracker/views/project.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from tracker.selectors.project import ProjectSelector
from tracker.serializers.project import (
    ProjectCreateSerializer,
    ProjectDetailOutputSerializer,
    ProjectMemberSerializer,
    ProjectOutputSerializer,
    ProjectUpdateSerializer
)
from tracker.services.access import AccessPolicy, Operation
from tracker.services.project import ProjectService
from tracker.views.utils import MessageSerializer, std_errors


def _project_response(project_id, response_status=status.HTTP_200_OK):
    project = ProjectSelector.get_project_by_id(project_id)
    return Response(ProjectOutputSerializer(project).data, status=response_status)


class ProjectListCreateAPIView(APIView):
    """
    GET: List projects the current user created or is a member of
    POST: Create a new project

    Request body (POST):
    - name: string (required)
    - description: string (optional)
    - members: list of user ids (optional, creator is always added)
    """

    @extend_schema(tags=["Projects"], responses={200: ProjectOutputSerializer(many=True)})
    def get(self, request):
        projects = ProjectSelector.get_projects_by_user(request.user.id)
        serializer = ProjectOutputSerializer(projects, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Projects"],
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors(400)},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(
            creator_id=request.user.id,
            **serializer.validated_data
        )

        return _project_response(project.id, status.HTTP_201_CREATED)


class ProjectDetailAPIView(APIView):
    """
    GET: Retrieve project details (creator and members only)
    PUT/PATCH: Update project (creator only)
    DELETE: Delete project (creator only)

    Path params:
    - project_id: int
    """

    @extend_schema(tags=["Projects"], responses={200: ProjectDetailOutputSerializer, **std_errors(404)})
    def get(self, request, project_id):
        project = ProjectSelector.get_project_by_id(project_id)

        # Foreign projects answer exactly like missing ones.
        if not project or not AccessPolicy.authorize(request.user.id, project, Operation.READ):
            return Response(
                {'error': 'Project not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        serializer = ProjectDetailOutputSerializer(project)
        return Response(serializer.data)

    @extend_schema(
        tags=["Projects"],
        request=ProjectUpdateSerializer,
        responses={200: ProjectOutputSerializer, **std_errors(400, 403)},
    )
    def put(self, request, project_id):
        serializer = ProjectUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ProjectService.update_project(
            project_id=project_id,
            user_id=request.user.id,
            **serializer.validated_data
        )

        return _project_response(project_id)

    @extend_schema(
        tags=["Projects"],
        request=ProjectUpdateSerializer,
        responses={200: ProjectOutputSerializer, **std_errors(400, 403)},
    )
    def patch(self, request, project_id):
        return self.put(request, project_id)

    @extend_schema(tags=["Projects"], responses={200: MessageSerializer, **std_errors(403)})
    def delete(self, request, project_id):
        result = ProjectService.delete_project(
            project_id=project_id,
            user_id=request.user.id
        )
        return Response(result)


class ProjectMemberAddAPIView(APIView):
    """
    POST: Add a member (creator only)

    Request body:
    - user_id: int
    """

    @extend_schema(
        tags=["Projects"],
        request=ProjectMemberSerializer,
        responses={200: ProjectOutputSerializer, **std_errors(400, 403)},
    )
    def post(self, request, project_id):
        serializer = ProjectMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ProjectService.add_member(
            project_id=project_id,
            user_id=request.user.id,
            member_id=serializer.validated_data['user_id']
        )

        return _project_response(project_id)


class ProjectMemberRemoveAPIView(APIView):
    """
    DELETE: Remove a member (creator only, never the creator)

    Path params:
    - project_id: int
    - user_id: int
    """

    @extend_schema(tags=["Projects"], responses={200: ProjectOutputSerializer, **std_errors(400, 403)})
    def delete(self, request, project_id, user_id):
        ProjectService.remove_member(
            project_id=project_id,
            user_id=request.user.id,
            member_id=user_id
        )

        return _project_response(project_id)
