# ============================================
# tracker/models/project.py
# ============================================
from django.conf import settings
from django.db import models


class Project(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_projects'
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='projects',
        blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['creator', '-created_at'], name='projects_creator_b4c1e2_idx'),
        ]

    def __str__(self):
        return self.name

    @property
    def member_ids(self) -> list:
        # Served from the prefetch cache when the selector loaded members.
        return [member.id for member in self.members.all()]
