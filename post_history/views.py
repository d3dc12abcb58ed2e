"""
JSON views for post version history.

Responses use the envelope {"success": true, "data": ...} or
{"success": false, "error": "..."}.
"""
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views import View

from . import services
from .exceptions import ContentNotFound, TransactionFailure, VersionConflict, VersionNotFound
from .models import Post


def _error(message, status):
    return JsonResponse({"success": False, "error": message}, status=status)


class PostVersionMixin(LoginRequiredMixin):
    """Resolve the post named in the URL, 404 if missing."""

    raise_exception = True

    def get_post(self):
        return get_object_or_404(Post, pk=self.kwargs["pk"])


class VersionListView(PostVersionMixin, View):
    """List a post's versions, newest first."""

    def get(self, request, pk):
        post = self.get_post()
        versions = services.list_versions(post)
        return JsonResponse({
            "success": True,
            "data": [version.to_dict() for version in versions],
        })


class VersionDetailView(PostVersionMixin, View):
    """Return one version by id."""

    def get(self, request, pk, version_id):
        post = self.get_post()
        try:
            version = services.get_version_by_id(post, version_id)
        except VersionNotFound:
            return _error("Version not found", 404)
        return JsonResponse({"success": True, "data": version.to_dict()})


class VersionCompareView(PostVersionMixin, View):
    """Compare two version numbers given as ?from=N&to=M."""

    def get(self, request, pk):
        post = self.get_post()
        try:
            from_version = int(request.GET["from"])
            to_version = int(request.GET["to"])
        except (KeyError, ValueError):
            return _error("Query parameters 'from' and 'to' must be integers", 400)

        try:
            diff = services.compare_versions(post, from_version, to_version)
        except VersionNotFound:
            return _error("Version not found", 404)
        return JsonResponse({"success": True, "data": diff.as_dict()})


class VersionRestoreView(PostVersionMixin, View):
    """Restore a post to a past version."""

    def post(self, request, pk, version_id):
        post = self.get_post()
        try:
            restored = services.restore_version(post, version_id)
        except VersionNotFound:
            return _error("Version not found", 404)
        except ContentNotFound:
            return _error("Post not found", 404)
        except VersionConflict:
            return _error("Version conflict, please retry", 409)
        except TransactionFailure:
            return _error("Internal server error", 500)
        return JsonResponse({"success": True, "data": restored.to_dict()})


class VersionCleanView(PostVersionMixin, View):
    """Delete old versions, keeping the newest ``keep_count``."""

    def post(self, request, pk):
        post = self.get_post()
        keep_count = request.POST.get("keep_count")
        try:
            keep_count = int(keep_count) if keep_count not in (None, "") else None
            deleted = services.clean_old_versions(post, keep_count)
        except ValueError:
            return _error("keep_count must be a non-negative integer", 400)
        return JsonResponse({"success": True, "data": {"deleted": deleted}})
