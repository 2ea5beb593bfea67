# ============================================
# tracker/serializers/task.py
# ============================================
from rest_framework import serializers
from tracker.models import Project, Task
from tracker.serializers.tag import TagOutputSerializer
from tracker.serializers.user import UserDetailSerializer


class DeadlineField(serializers.DateTimeField):
    """ISO-8601 date-time; a bare date is rejected"""

    default_error_messages = {
        'date_only': 'Deadline needs a time part, e.g. 2026-11-01T09:00:00Z.',
    }

    def to_internal_value(self, value):
        if isinstance(value, str) and 'T' not in value.upper():
            self.fail('date_only')
        return super().to_internal_value(value)


class TaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(
        choices=Task.Status.choices,
        default=Task.Status.TODO
    )
    priority = serializers.ChoiceField(
        choices=Task.Priority.choices,
        default=Task.Priority.MEDIUM
    )
    deadline = DeadlineField(required=False, allow_null=True)
    project_id = serializers.IntegerField(required=False, allow_null=True)
    assignee_id = serializers.IntegerField(required=False, allow_null=True)
    tag_ids = serializers.ListField(
        child=serializers.IntegerField(),
        required=False
    )
    new_tag_name = serializers.CharField(max_length=50, required=False, allow_blank=True)


class TaskUpdateSerializer(serializers.Serializer):
    """Every field optional; only the keys sent end up in validated_data"""
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=Task.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Task.Priority.choices, required=False)
    deadline = DeadlineField(required=False, allow_null=True)
    project_id = serializers.IntegerField(required=False, allow_null=True)
    assignee_id = serializers.IntegerField(required=False, allow_null=True)
    tag_ids = serializers.ListField(
        child=serializers.IntegerField(),
        required=False
    )
    new_tag_name = serializers.CharField(max_length=50, required=False, allow_blank=True)


class TaskFilterSerializer(serializers.Serializer):
    project_id = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=Task.Status.choices, required=False)
    assignee_id = serializers.IntegerField(required=False)


class TaskProjectsFilterSerializer(serializers.Serializer):
    project_ids = serializers.ListField(child=serializers.IntegerField())


class TaskProjectSerializer(serializers.ModelSerializer):
    creator_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Project
        fields = ['id', 'name', 'description', 'creator_id', 'created_at', 'updated_at']


class TaskOutputSerializer(serializers.ModelSerializer):
    project = TaskProjectSerializer(read_only=True)
    assignee = UserDetailSerializer(read_only=True)
    creator = UserDetailSerializer(read_only=True)
    tags = TagOutputSerializer(many=True, read_only=True)

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'description', 'status', 'priority', 'deadline',
            'project', 'assignee', 'creator', 'tags',
            'created_at', 'updated_at'
        ]
