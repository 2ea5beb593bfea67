# ============================================
# tracker/models/tag.py
# ============================================
from django.core.validators import MinLengthValidator
from django.db import models


class Tag(models.Model):
    name = models.CharField(
        max_length=50,
        unique=True,
        validators=[MinLengthValidator(1)]
    )

    class Meta:
        db_table = 'tags'
        ordering = ['name']

    def __str__(self):
        return self.name
