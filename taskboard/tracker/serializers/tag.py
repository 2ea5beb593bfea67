# ============================================
# tracker/serializers/tag.py
# ============================================
from rest_framework import serializers
from tracker.models import Tag


class TagCreateSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=50, trim_whitespace=False)


class TagOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ['id', 'name']
