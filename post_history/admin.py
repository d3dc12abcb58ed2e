"""
Django admin configuration for post_history.
"""
from django.contrib import admin, messages

from . import services
from .exceptions import PostHistoryError
from .models import Post, PostVersion


class PostVersionInline(admin.TabularInline):
    """Read-only list of a post's versions."""

    model = PostVersion
    extra = 0
    fields = ["version", "title", "created_at"]
    readonly_fields = fields
    ordering = ["-version"]
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ["title_preview", "author", "is_draft", "version_count", "created_at"]
    list_filter = ["is_draft", "created_at"]
    search_fields = ["title", "body", "author__username"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    inlines = [PostVersionInline]
    readonly_fields = ["created_at", "updated_at"]
    prepopulated_fields = {"slug": ("title",)}

    actions = ["clean_versions"]

    def title_preview(self, obj):
        """Truncated title for list display."""
        if obj.title:
            return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title
        return obj.body[:40] + "..." if len(obj.body) > 40 else obj.body

    title_preview.short_description = "Title"

    def version_count(self, obj):
        return obj.versions.count()

    version_count.short_description = "Versions"

    def save_model(self, request, obj, form, change):
        # Route edits through services so each one is recorded as a version.
        if change:
            fields = {
                name: form.cleaned_data[name]
                for name in form.changed_data
                if name not in ("title", "body")
            }
            services.update_post(
                obj.pk,
                title=obj.title if "title" in form.changed_data else None,
                body=obj.body if "body" in form.changed_data else None,
                **fields,
            )
        else:
            super().save_model(request, obj, form, change)
            services.create_version(obj, obj.title, obj.body)

    @admin.action(description="Delete old versions of selected posts")
    def clean_versions(self, request, queryset):
        deleted = sum(services.clean_old_versions(post) for post in queryset)
        self.message_user(request, f"{deleted} old version(s) deleted.")


@admin.register(PostVersion)
class PostVersionAdmin(admin.ModelAdmin):
    list_display = ["post", "version", "title", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["title", "body", "post__title"]
    raw_id_fields = ["post"]
    readonly_fields = ["post", "version", "title", "body", "created_at"]
    ordering = ["post", "-version"]

    actions = ["restore_versions"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    @admin.action(description="Restore selected version")
    def restore_versions(self, request, queryset):
        if queryset.count() != 1:
            self.message_user(
                request,
                "Select exactly one version to restore.",
                level=messages.WARNING,
            )
            return

        version = queryset.get()
        try:
            services.restore_version(version.post_id, version.pk)
        except PostHistoryError as exc:
            self.message_user(request, f"Restore failed: {exc}", level=messages.ERROR)
            return
        self.message_user(request, f"Restored {version.post} to version {version.version}.")
