"""
URL configuration for django-post-history.

Include in your project urls.py:

    path('admin/api/', include('post_history.urls')),
"""
from django.urls import path

from . import views

app_name = "post_history"

urlpatterns = [
    path("post/<int:pk>/versions/", views.VersionListView.as_view(), name="version_list"),
    path(
        "post/<int:pk>/versions/compare/",
        views.VersionCompareView.as_view(),
        name="version_compare",
    ),
    path(
        "post/<int:pk>/versions/clean/",
        views.VersionCleanView.as_view(),
        name="version_clean",
    ),
    path(
        "post/<int:pk>/versions/<int:version_id>/",
        views.VersionDetailView.as_view(),
        name="version_detail",
    ),
    path(
        "post/<int:pk>/versions/<int:version_id>/restore/",
        views.VersionRestoreView.as_view(),
        name="version_restore",
    ),
]
