"""``plowfinder resolve`` - classify one path the way the site does.

Prints the resource kind, its name and canonical URL. Exits with code 1
when the path resolves to Not-Found.
"""

import argparse
import json

from plowfinder.cli._common import load_registry, site_config
from plowfinder.registry.loader import dump_provider
from plowfinder.registry.models import City, Provider
from plowfinder.routing.classifier import Classifier


def run_resolve(args: argparse.Namespace) -> None:
    config = site_config(args)
    registry = load_registry(args)
    resolution = Classifier(registry).classify(args.path)

    if args.json:
        ref = resolution.ref
        record: dict[str, object] = {"kind": resolution.kind.value, "canonical_path": resolution.canonical_path}
        if isinstance(ref, Provider):
            record["provider"] = dump_provider(ref)
        elif isinstance(ref, City):
            record["city"] = {"name": ref.name, "shortSlug": ref.short_slug, "longSlug": ref.long_slug}
        elif ref is not None:
            record["page"] = ref.name.lower()
        print(json.dumps(record, indent=2))
    elif resolution.found:
        canonical = config.absolute_url(resolution.canonical_path or "/")
        print(f"{resolution.kind.value}: {resolution.label} -> {canonical}")
    else:
        print(f"not found: {args.path!r}")

    if not resolution.found:
        raise SystemExit(1)
