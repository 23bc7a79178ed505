"""Serializers for the Site Counts app."""

from rest_framework import serializers


class RenderQuerySerializer(serializers.Serializer):
    """Query parameters accepted by the render endpoint."""

    className = serializers.CharField(required=False, allow_blank=True, max_length=255)


class RenderedBlockSerializer(serializers.Serializer):
    """Rendered block markup for one item."""

    item_id = serializers.IntegerField(read_only=True)
    html = serializers.CharField(read_only=True)
