"""
URL configuration for ol_auto_translation app.
"""

from django.urls import re_path

from ol_auto_translation.views import (
    ConnectionTestView,
    ModelFieldsView,
    ModelListView,
    TranslateMessagesView,
    TranslateModelsView,
    TranslationStatsView,
    UsageView,
)

urlpatterns = [
    re_path(
        r"^api/translate/messages/$",
        TranslateMessagesView.as_view(),
        name="translate_messages",
    ),
    re_path(
        r"^api/translate/models/$",
        TranslateModelsView.as_view(),
        name="translate_models",
    ),
    re_path(r"^api/usage/$", UsageView.as_view(), name="usage"),
    re_path(r"^api/connection/$", ConnectionTestView.as_view(), name="connection"),
    re_path(r"^api/stats/$", TranslationStatsView.as_view(), name="stats"),
    re_path(r"^api/models/$", ModelListView.as_view(), name="models"),
    re_path(
        r"^api/models/(?P<model_name>[\w.-]+)/fields/$",
        ModelFieldsView.as_view(),
        name="model_fields",
    ),
]
