# Generated migration for the content app

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Term",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("taxonomy", models.CharField(choices=[("post_tag", "Tag"), ("category", "Category")], max_length=32)),
                ("slug", models.SlugField(max_length=200)),
                ("name", models.CharField(max_length=200)),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("taxonomy", "slug"), name="unique_term_slug_per_taxonomy"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ContentItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("post_type", models.CharField(db_index=True, default="post", max_length=20)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("pending", "Pending review"),
                            ("private", "Private"),
                            ("publish", "Published"),
                            ("future", "Scheduled"),
                            ("trash", "Trash"),
                            ("inherit", "Inherit"),
                            ("auto-draft", "Auto draft"),
                        ],
                        db_index=True,
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("title", models.CharField(blank=True, max_length=255)),
                ("published_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("is_sticky", models.BooleanField(default=False)),
                ("terms", models.ManyToManyField(blank=True, related_name="items", to="content.term")),
            ],
            options={
                "ordering": ["-published_at", "-id"],
                "indexes": [
                    models.Index(fields=["post_type", "status"], name="content_type_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ContentMeta",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(db_index=True, max_length=255)),
                ("value", models.TextField(blank=True)),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="meta",
                        to="content.contentitem",
                    ),
                ),
            ],
            options={
                "verbose_name": "Content Meta",
                "verbose_name_plural": "Content Meta",
                "constraints": [
                    models.UniqueConstraint(fields=("item", "key"), name="unique_meta_key_per_item"),
                ],
            },
        ),
    ]
