from django.db import models
from django.utils import timezone

from core.models import AbstractBaseModel

from .signals import post_status_transitioned


class ContentStatus(models.TextChoices):
    DRAFT = "draft", "Draft"
    PENDING = "pending", "Pending review"
    PRIVATE = "private", "Private"
    PUBLISH = "publish", "Published"
    FUTURE = "future", "Scheduled"
    TRASH = "trash", "Trash"
    INHERIT = "inherit", "Inherit"
    AUTO_DRAFT = "auto-draft", "Auto draft"


# Pseudo-status reported as old_status when an item is first saved
STATUS_NEW = "new"


class Term(models.Model):
    """A tag or category that content items can be filed under."""

    TAXONOMY_TAG = "post_tag"
    TAXONOMY_CATEGORY = "category"
    TAXONOMY_CHOICES = [
        (TAXONOMY_TAG, "Tag"),
        (TAXONOMY_CATEGORY, "Category"),
    ]

    taxonomy = models.CharField(max_length=32, choices=TAXONOMY_CHOICES)
    slug = models.SlugField(max_length=200)
    name = models.CharField(max_length=200)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["taxonomy", "slug"], name="unique_term_slug_per_taxonomy"
            ),
        ]

    def __str__(self):
        return f"{self.taxonomy}:{self.slug}"


class ContentItem(AbstractBaseModel):
    """
    A single post, page, attachment or other typed unit of content.

    Saving an item whose status differs from the one it was loaded with
    sends ``post_status_transitioned``. Deleting an item is permanent;
    use ``trash()`` for the soft-delete path.
    """

    post_type = models.CharField(max_length=20, default="post", db_index=True)
    status = models.CharField(
        max_length=20,
        choices=ContentStatus.choices,
        default=ContentStatus.DRAFT,
        db_index=True,
    )
    title = models.CharField(max_length=255, blank=True)
    published_at = models.DateTimeField(default=timezone.now, db_index=True)
    is_sticky = models.BooleanField(default=False)
    terms = models.ManyToManyField(Term, blank=True, related_name="items")

    class Meta:
        ordering = ["-published_at", "-id"]
        indexes = [
            models.Index(fields=["post_type", "status"], name="content_type_status_idx"),
        ]

    def __str__(self):
        return f"{self.post_type} #{self.pk}: {self.title}"

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_status = instance.__dict__.get("status")
        return instance

    @property
    def persisted_status(self):
        """Status as last written to the database, ``"new"`` if never saved."""
        if self._state.adding:
            return STATUS_NEW
        status = getattr(self, "_loaded_status", None)
        if status is None:
            # Status was deferred or the instance was built by hand
            status = (
                type(self).objects.filter(pk=self.pk)
                .values_list("status", flat=True)
                .first()
            )
        return status or STATUS_NEW

    def save(self, *args, **kwargs):
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "status" not in update_fields:
            # Status is not written, the stored one still stands
            super().save(*args, **kwargs)
            return

        old_status = self.persisted_status
        super().save(*args, **kwargs)
        new_status = str(self.status)
        self._loaded_status = new_status

        if old_status != new_status:
            post_status_transitioned.send(
                sender=self.__class__,
                item=self,
                old_status=old_status,
                new_status=new_status,
            )

    def trash(self):
        """Move the item to the trash instead of deleting it."""
        self.status = ContentStatus.TRASH
        self.save(update_fields=["status", "updated_at"])


class ContentMeta(models.Model):
    """Key/value metadata attached to a content item."""

    item = models.ForeignKey(
        ContentItem, on_delete=models.CASCADE, related_name="meta"
    )
    key = models.CharField(max_length=255, db_index=True)
    value = models.TextField(blank=True)

    class Meta:
        verbose_name = "Content Meta"
        verbose_name_plural = "Content Meta"
        constraints = [
            models.UniqueConstraint(fields=["item", "key"], name="unique_meta_key_per_item"),
        ]

    def __str__(self):
        return f"{self.item_id}:{self.key}"
