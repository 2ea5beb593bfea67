# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers
from tracker.models import Project, Task
from tracker.serializers.user import UserDetailSerializer


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    members = serializers.ListField(
        child=serializers.IntegerField(),
        required=False,
        default=list
    )


class ProjectUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ProjectMemberSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()


class ProjectTaskSummarySerializer(serializers.ModelSerializer):
    """Just enough of each task for a project overview"""
    assignee_id = serializers.IntegerField(read_only=True)
    creator_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'status', 'priority', 'deadline',
            'assignee_id', 'creator_id'
        ]


class ProjectOutputSerializer(serializers.ModelSerializer):
    creator = UserDetailSerializer(read_only=True)
    members = UserDetailSerializer(many=True, read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'creator', 'members',
            'created_at', 'updated_at'
        ]


class ProjectDetailOutputSerializer(ProjectOutputSerializer):
    tasks = ProjectTaskSummarySerializer(many=True, read_only=True)

    class Meta(ProjectOutputSerializer.Meta):
        fields = ProjectOutputSerializer.Meta.fields + ['tasks']
