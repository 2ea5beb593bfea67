# ============================================
# tracker/models/user.py
# ============================================
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    name = models.CharField(max_length=255, null=True, blank=True)
    email = models.EmailField(null=True, blank=True)
    image = models.URLField(max_length=500, null=True, blank=True)

    class Meta:
        db_table = 'users'
        ordering = ['name']

    def __str__(self):
        return self.name or self.username
