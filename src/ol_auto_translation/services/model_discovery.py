"""Registry of translatable host models and their field metadata."""

import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sized
from dataclasses import dataclass

from django.conf import settings
from django.utils.module_loading import import_string

from ol_auto_translation.constants import (
    META_FIELD_NAMES,
    NOT_RECOMMENDED_FIELD_NAMES,
    RICH_TEXT_FIELD_NAMES,
    SLUG_FIELD_NAMES,
)
from ol_auto_translation.exceptions import ConfigurationError, ValidationError

log = logging.getLogger(__name__)


def make_label(name: str) -> str:
    """
    Turn a field or model name into a human readable label.

    Examples:
        >>> make_label("BlogPost")
        'Blog Post'
        >>> make_label("meta_title")
        'Meta Title'
    """
    label = re.sub(r"(?<!^)(?=[A-Z])", " ", name).replace("_", " ")
    return " ".join(word[:1].upper() + word[1:] for word in label.split())


@dataclass(frozen=True)
class RegisteredModel:
    """
    A host model the plugin may translate.

    ``fields`` and ``counter`` are optional callables returning the field
    configs and the record count without loading the records.
    """

    name: str
    loader: Callable[[Iterable | None], Iterable]
    label: str
    fields: Callable[[], Mapping] | None = None
    counter: Callable[[], int] | None = None

    def load(self, ids: Iterable | None = None) -> list:
        """Return the records with the given ids, or all records."""
        return list(self.loader(ids))

    def get_field_configs(self) -> dict:
        """Return ``{field_name: field_config}``, reading at most one record."""
        if self.fields is not None:
            return dict(self.fields())
        first_record = next(iter(self.loader(None)), None)
        if first_record is None:
            return {}
        return dict(first_record.translatable_fields())

    def count(self) -> int | None:
        """
        Return the number of records, or None when it is unknown.

        Querysets are counted with ``count()``; plain iterators are not consumed.
        """
        if self.counter is not None:
            return self.counter()
        records = self.loader(None)
        count = getattr(records, "count", None)
        if callable(count) and not isinstance(records, list | tuple):
            return count()
        if isinstance(records, Sized):
            return len(records)
        return None


class ModelRegistry:
    """Named loaders for the host models exposed to translation."""

    def __init__(self):
        self._models = {}

    @classmethod
    def from_settings(cls, django_settings=None) -> "ModelRegistry":
        """
        Build a registry from ``AUTO_TRANSLATION_MODELS``.

        The setting maps a model name to the dotted path of its loader, or to a
        dict with a ``loader`` path and optional ``fields`` and ``count`` paths
        and ``label``.

        Raises:
            ConfigurationError: If an entry has no loader or a path cannot be
                imported
        """
        django_settings = django_settings or settings
        registry = cls()
        for name, entry in getattr(
            django_settings, "AUTO_TRANSLATION_MODELS", {}
        ).items():
            if isinstance(entry, str):
                entry = {"loader": entry}  # noqa: PLW2901
            if not entry.get("loader"):
                msg = f"No loader configured for model '{name}'"
                raise ConfigurationError(msg)

            registry.register(
                name,
                cls._import(name, entry["loader"]),
                label=entry.get("label"),
                fields=cls._import(name, entry.get("fields")),
                counter=cls._import(name, entry.get("count")),
            )
        return registry

    @staticmethod
    def _import(name: str, path: str | None):
        if not path:
            return None
        try:
            return import_string(path)
        except ImportError as exc:
            msg = f"Could not import '{path}' for model '{name}'"
            raise ConfigurationError(msg) from exc

    def register(  # noqa: PLR0913
        self,
        name: str,
        loader,
        label: str | None = None,
        fields=None,
        counter=None,
    ) -> None:
        self._models[name] = RegisteredModel(
            name=name,
            loader=loader,
            label=label or make_label(name),
            fields=fields,
            counter=counter,
        )

    def get(self, name: str) -> RegisteredModel:
        try:
            return self._models[name]
        except KeyError:
            msg = f"Unknown model '{name}'"
            raise ValidationError(msg) from None

    def names(self) -> list[str]:
        return list(self._models)

    def __iter__(self):
        return iter(self._models.values())

    def __len__(self):
        return len(self._models)


class ModelDiscoveryService:
    """List registered models together with their translatable fields."""

    def __init__(self, registry: ModelRegistry, field_filter):
        self.registry = registry
        self.field_filter = field_filter

    def get_translatable_models(self) -> list[dict]:
        """
        Return registered models that declare at least one translatable field,
        sorted by label.

        Records are not loaded; ``record_count`` is None when the model cannot
        be counted cheaply.
        """
        models = []
        for registered_model in self.registry:
            try:
                fields = self.describe_fields(registered_model.get_field_configs())
                record_count = registered_model.count() if fields else None
            except Exception:
                log.exception("Could not inspect model %s", registered_model.name)
                continue

            if not fields:
                log.debug("Skipping %s, no translatable fields", registered_model.name)
                continue

            models.append(
                {
                    "name": registered_model.name,
                    "label": registered_model.label,
                    "fields": fields,
                    "record_count": record_count,
                }
            )
        return sorted(models, key=lambda model: model["label"])

    def get_model_fields(self, name: str) -> dict[str, dict]:
        """
        Return the field metadata of one registered model.

        Raises:
            ValidationError: If the model is not registered
        """
        return self.describe_fields(self.registry.get(name).get_field_configs())

    def describe_fields(self, field_configs: Mapping) -> dict[str, dict]:
        fields = {}
        for field_name, field_config in field_configs.items():
            field_type = (field_config or {}).get("type") or self.guess_field_type(
                field_name
            )
            fields[field_name] = {
                "name": field_name,
                "label": make_label(field_name),
                "type": field_type,
                "recommended": self.is_recommended(field_name, field_config),
            }
        return fields

    @staticmethod
    def guess_field_type(field_name: str) -> str:
        lower_name = field_name.lower()
        if lower_name in RICH_TEXT_FIELD_NAMES:
            return "richeditor"
        if lower_name in SLUG_FIELD_NAMES:
            return "slug"
        if lower_name in META_FIELD_NAMES:
            return "meta"
        return "text"

    def is_recommended(self, field_name: str, field_config=None) -> bool:
        if field_name.lower() in NOT_RECOMMENDED_FIELD_NAMES:
            return False
        return self.field_filter.should_translate(field_name, field_config)
