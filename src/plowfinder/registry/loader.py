"""Provider data loading.

Converts the provider JSON document (an ordered array of objects with
camelCase keys) into frozen :class:`Provider` records. Any problem with the
source is a :class:`RegistryError`: the build must halt before writing output.

Validation is strict for the fields routing depends on (``id``, ``name``,
``serviceAreas``) and lenient for display fields, which are passed through
when they have the expected type. Unknown keys are kept in ``Provider.extra``.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from plowfinder.errors import RegistryError
from plowfinder.registry.models import Provider

logger = logging.getLogger("plowfinder.registry")

# JSON key -> Provider field
_FIELD_NAMES: dict[str, str] = {
    "id": "id",
    "name": "name",
    "serviceAreas": "service_areas",
    "city": "city",
    "services": "services",
    "residential": "residential",
    "commercial": "commercial",
    "ruralDriveways": "rural_driveways",
    "twentyFourSeven": "twenty_four_seven",
    "phone": "phone",
    "website": "website",
    "description": "description",
}

_STR_FIELDS = frozenset({"city", "phone", "website", "description"})
_BOOL_FIELDS = frozenset({"residential", "commercial", "rural_driveways", "twenty_four_seven"})


def load_providers(path: str | Path) -> tuple[Provider, ...]:
    """Read and validate the provider file at *path*, preserving order."""
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"Provider data not found: {source}"
        raise RegistryError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read provider data {source}: {exc}"
        raise RegistryError(msg) from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Provider data {source} is not valid JSON: {exc}"
        raise RegistryError(msg) from exc

    providers = parse_providers(document, source=str(source))
    logger.info("Loaded %d providers from %s", len(providers), source)
    return providers


def parse_providers(document: Any, *, source: str = "<providers>") -> tuple[Provider, ...]:
    """Validate an already-decoded provider document.

    Raises ``RegistryError`` when the document is not a list, when a record
    is malformed, or when two records share an ``id``.
    """
    if not isinstance(document, list):
        msg = f"{source}: expected a JSON array of providers, got {type(document).__name__}"
        raise RegistryError(msg)

    providers: list[Provider] = []
    seen: dict[int, int] = {}
    for index, record in enumerate(document):
        provider = _parse_record(record, index=index, source=source)
        if provider.id in seen:
            msg = (
                f"{source}[{index}]: duplicate provider id {provider.id} "
                f"(first used at index {seen[provider.id]})"
            )
            raise RegistryError(msg)
        seen[provider.id] = index
        providers.append(provider)
    return tuple(providers)


def _parse_record(record: Any, *, index: int, source: str) -> Provider:
    where = f"{source}[{index}]"
    if not isinstance(record, Mapping):
        msg = f"{where}: expected an object, got {type(record).__name__}"
        raise RegistryError(msg)

    ident = record.get("id")
    # bool is an int subclass; True is not a provider id
    if not isinstance(ident, int) or isinstance(ident, bool):
        msg = f"{where}: 'id' must be an integer, got {ident!r}"
        raise RegistryError(msg)

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        msg = f"{where}: 'name' must be a non-empty string, got {name!r}"
        raise RegistryError(msg)

    fields: dict[str, Any] = {
        "id": ident,
        "name": name,
        "service_areas": _string_tuple(record.get("serviceAreas", []), key="serviceAreas", where=where),
    }
    extra: dict[str, object] = {}
    for key, value in record.items():
        field_name = _FIELD_NAMES.get(key)
        if field_name is None:
            extra[key] = value
        elif field_name in _STR_FIELDS and isinstance(value, str):
            fields[field_name] = value
        elif field_name in _BOOL_FIELDS and isinstance(value, bool):
            fields[field_name] = value
        elif field_name == "services" and isinstance(value, list):
            fields["services"] = _string_tuple(value, key="services", where=where)
    return Provider(**fields, extra=extra)


def _string_tuple(value: Any, *, key: str, where: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg = f"{where}: '{key}' must be a list of strings, got {value!r}"
        raise RegistryError(msg)
    return tuple(value)


def dump_provider(provider: Provider) -> dict[str, Any]:
    """Inverse of the record parser, used by the ``resolve`` command output."""
    reverse = {field_name: key for key, field_name in _FIELD_NAMES.items()}
    record: dict[str, Any] = {}
    for field_name, key in reverse.items():
        value = getattr(provider, field_name)
        record[key] = list(value) if isinstance(value, tuple) else value
    record.update(provider.extra)
    return record


def iter_service_areas(providers: Iterable[Provider]) -> set[str]:
    """Every city name any provider claims to serve."""
    return {area for provider in providers for area in provider.service_areas}
