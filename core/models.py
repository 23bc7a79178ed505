"""Abstract base models shared across apps."""

from django.db import models


class AbstractBaseModel(models.Model):
    """
    Base model with creation and modification timestamps.

    Primary keys stay on the project default (BigAutoField) so content
    identifiers are plain integers.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
