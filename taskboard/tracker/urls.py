# ============================================
# tracker/urls.py
# ============================================
from django.urls import path
from tracker.views.project import (
    ProjectListCreateAPIView,
    ProjectDetailAPIView,
    ProjectMemberAddAPIView,
    ProjectMemberRemoveAPIView
)
from tracker.views.task import (
    TaskListCreateAPIView,
    TaskByProjectsAPIView,
    TaskDetailAPIView
)
from tracker.views.tag import (
    TagListCreateAPIView,
    TagDetailAPIView
)
from tracker.views.user import (
    UserListAPIView,
    UserProfileAPIView,
    UserAssignedTasksAPIView
)

app_name = 'tracker'

urlpatterns = [
    # Projects
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/<int:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<int:project_id>/members/', ProjectMemberAddAPIView.as_view(), name='project-member-add'),
    path('projects/<int:project_id>/members/<int:user_id>/', ProjectMemberRemoveAPIView.as_view(), name='project-member-remove'),

    # Tasks
    path('tasks/', TaskListCreateAPIView.as_view(), name='task-list-create'),
    path('tasks/by-projects/', TaskByProjectsAPIView.as_view(), name='task-by-projects'),
    path('tasks/<int:task_id>/', TaskDetailAPIView.as_view(), name='task-detail'),

    # Tags
    path('tags/', TagListCreateAPIView.as_view(), name='tag-list-create'),
    path('tags/<int:tag_id>/', TagDetailAPIView.as_view(), name='tag-detail'),

    # Users
    path('users/', UserListAPIView.as_view(), name='user-list'),
    path('users/me/', UserProfileAPIView.as_view(), name='user-profile'),
    path('users/me/assigned-tasks/', UserAssignedTasksAPIView.as_view(), name='user-assigned-tasks'),
]
