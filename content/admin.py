from django.contrib import admin
from .models import ContentItem, ContentMeta, Term


class ContentMetaInline(admin.TabularInline):
    model = ContentMeta
    extra = 0


@admin.register(ContentItem)
class ContentItemAdmin(admin.ModelAdmin):
    """Admin interface for content items."""

    list_display = ['title', 'post_type', 'status', 'published_at', 'is_sticky']
    list_filter = ['post_type', 'status', 'is_sticky']
    search_fields = ['title']
    readonly_fields = ['id', 'created_at', 'updated_at']
    filter_horizontal = ['terms']
    inlines = [ContentMetaInline]


@admin.register(Term)
class TermAdmin(admin.ModelAdmin):
    list_display = ['name', 'taxonomy', 'slug']
    list_filter = ['taxonomy']
    search_fields = ['name', 'slug']


@admin.register(ContentMeta)
class ContentMetaAdmin(admin.ModelAdmin):
    list_display = ['item', 'key']
    list_filter = ['key']
    search_fields = ['key']
