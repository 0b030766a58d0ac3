"""
API Views for ol_auto_translation App
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from ol_auto_translation.constants import JOB_TYPE_MESSAGES, JOB_TYPE_MODELS
from ol_auto_translation.exceptions import AutoTranslationError
from ol_auto_translation.utils import (
    get_message_stats_service,
    get_message_translation_service,
    get_model_discovery_service,
    get_model_translation_service,
    get_translation_config,
    get_translation_provider,
    run_translation_job,
)

log = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_WARNING = "warning"
STATUS_ERROR = "error"


def get_list_param(data, name):
    """Return a request parameter as a list, accepting a single value too."""
    if hasattr(data, "getlist"):
        values = data.getlist(name)
        if len(values) == 1 and isinstance(values[0], list):
            values = values[0]
    else:
        values = data.get(name) or []
    if isinstance(values, str):
        values = [values]
    return [value for value in values if value not in ("", None)]


def get_bool_param(data, name):
    value = data.get(name, False)
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes", "on")
    return bool(value)


def error_response(message, status_code=status.HTTP_400_BAD_REQUEST):
    return Response({"status": STATUS_ERROR, "message": message}, status=status_code)


class TranslateMessagesView(APIView):
    """
    API View to translate UI messages into one or more locales.

    Sample Request:
        POST /auto-translation/api/translate/messages/
        {
            "target_locales": ["de", "fr"],
            "message_ids": [1, 2],
            "overwrite": false
        }

    Sample Response:
        200 OK
        {
            "status": "success",
            "message": "Successfully translated 4 messages",
            "count": 4,
            "reports": [...]
        }

    Error Responses:
        400 Bad Request
        {
            "status": "error",
            "message": "Translation failed: ..."
        }
    """

    permission_classes = [IsAdminUser]

    def post(self, request):
        """
        Translate the selected (or all) messages to every target locale.
        """
        target_locales = get_list_param(request.data, "target_locales")
        message_ids = get_list_param(request.data, "message_ids") or None
        overwrite = get_bool_param(request.data, "overwrite")

        try:
            config = get_translation_config()
            service = get_message_translation_service(config)
            reports = run_translation_job(
                JOB_TYPE_MESSAGES,
                target_locales,
                lambda source, target: service.translate_messages_in_batch(
                    source, target, message_ids, overwrite
                ),
                config.effective_source_locale,
            )
        except AutoTranslationError as error:
            log.info("Message translation rejected: %s", error)
            return error_response(f"Translation failed: {error}")
        except Exception as error:
            log.exception("Message translation error")
            return error_response(f"Translation failed: {error}")

        total = sum(report.count for report in reports)
        if total > 0:
            result_status = STATUS_SUCCESS
            message = f"Successfully translated {total} messages"
        else:
            result_status = STATUS_WARNING
            message = (
                "No messages were translated. They may already be translated "
                "or empty."
            )
        return Response(
            {
                "status": result_status,
                "message": message,
                "count": total,
                "reports": [report.as_dict() for report in reports],
            }
        )


class TranslateModelsView(APIView):
    """
    API View to translate the records of a registered model.

    Sample Request:
        POST /auto-translation/api/translate/models/
        {
            "model": "blog_post",
            "target_locales": ["de"],
            "ids": [3, 4],
            "fields": ["title"],
            "overwrite": true
        }

    Sample Response:
        200 OK
        {
            "status": "success",
            "message": "Successfully translated 2 model records",
            "count": 2,
            "reports": [...]
        }
    """

    permission_classes = [IsAdminUser]

    def post(self, request):
        """
        Translate the selected (or all) records to every target locale.
        """
        model_name = request.data.get("model")
        if not model_name:
            return error_response("Please select a model")

        target_locales = get_list_param(request.data, "target_locales")
        ids = get_list_param(request.data, "ids") or None
        options = {
            "overwrite": get_bool_param(request.data, "overwrite"),
            "fields": get_list_param(request.data, "fields"),
        }

        try:
            config = get_translation_config()
            service = get_model_translation_service(config)
            reports = run_translation_job(
                JOB_TYPE_MODELS,
                target_locales,
                lambda source, target: service.translate_models_in_batch(
                    model_name, source, target, ids, options
                ),
                config.effective_source_locale,
            )
        except AutoTranslationError as error:
            log.info("Model translation of %s rejected: %s", model_name, error)
            return error_response(f"Translation failed: {error}")
        except Exception as error:
            log.exception("Model translation error for %s", model_name)
            return error_response(f"Translation failed: {error}")

        total = sum(report.count for report in reports)
        if total > 0:
            result_status = STATUS_SUCCESS
            message = f"Successfully translated {total} model records"
        else:
            result_status = STATUS_WARNING
            message = "No models were translated"
        return Response(
            {
                "status": result_status,
                "message": message,
                "count": total,
                "reports": [report.as_dict() for report in reports],
            }
        )


class UsageView(APIView):
    """
    API View returning the DeepL character usage of the configured account.

    Sample Response:
        200 OK
        {
            "character_count": 1200,
            "character_limit": 500000,
            "limit_reached": false
        }
    """

    permission_classes = [IsAdminUser]

    def get(self, request):  # noqa: ARG002
        try:
            provider = get_translation_provider()
        except AutoTranslationError as error:
            return error_response(f"Failed to check usage: {error}")

        usage = provider.get_usage()
        if usage is None:
            return error_response(
                "Failed to check usage: DeepL did not return usage data",
                status.HTTP_502_BAD_GATEWAY,
            )

        character = usage.character
        return Response(
            {
                "character_count": character.count,
                "character_limit": character.limit,
                "limit_reached": usage.any_limit_reached,
            }
        )


class ConnectionTestView(APIView):
    """
    API View checking that DeepL accepts the configured API key.
    """

    permission_classes = [IsAdminUser]

    def get(self, request):  # noqa: ARG002
        try:
            provider = get_translation_provider()
        except AutoTranslationError as error:
            return error_response(str(error))

        if provider.test_connection():
            return Response(
                {"status": STATUS_SUCCESS, "message": "Connected to DeepL"}
            )
        return error_response(
            "Could not connect to DeepL, check the API key and server type",
            status.HTTP_502_BAD_GATEWAY,
        )


class TranslationStatsView(APIView):
    """
    API View with message translation coverage for one target locale.

    Sample Request:
        GET /auto-translation/api/stats/?target_locale=de

    Sample Response:
        200 OK
        {
            "source_locale": "en",
            "target_locale": "de",
            "stats": {
                "messages_total": 10,
                "messages_translated": 7,
                "messages_missing": 3
            }
        }
    """

    permission_classes = [IsAdminUser]

    def get(self, request):
        target_locale = request.query_params.get("target_locale")
        if not target_locale:
            return error_response("Please select a target language")

        try:
            config = get_translation_config()
            service = get_message_stats_service(config)
            source_locale = request.query_params.get(
                "source_locale", config.effective_source_locale
            )
            stats = service.get_translation_stats(source_locale, target_locale)
        except AutoTranslationError as error:
            return error_response(str(error))

        return Response(
            {
                "source_locale": source_locale,
                "target_locale": target_locale,
                "stats": stats,
            }
        )


class ModelListView(APIView):
    """
    API View listing the registered models with translatable fields.
    """

    permission_classes = [IsAdminUser]

    def get(self, request):  # noqa: ARG002
        try:
            models = get_model_discovery_service().get_translatable_models()
        except AutoTranslationError as error:
            return error_response(str(error))
        return Response({"models": models})


class ModelFieldsView(APIView):
    """
    API View listing the translatable fields of one registered model.
    """

    permission_classes = [IsAdminUser]

    def get(self, request, model_name):  # noqa: ARG002
        try:
            fields = get_model_discovery_service().get_model_fields(model_name)
        except AutoTranslationError as error:
            log.info("Could not list fields of %s: %s", model_name, error)
            return error_response(str(error), status.HTTP_404_NOT_FOUND)
        return Response({"model": model_name, "fields": fields})
