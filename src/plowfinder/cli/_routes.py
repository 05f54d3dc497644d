"""``plowfinder routes`` - list exportable paths in write order.

Short URLs that a clean export would skip are flagged with the reason.
"""

import argparse

from plowfinder.cli._common import load_registry
from plowfinder.export.writer import StaticExporter
from plowfinder.routing.route import Resolution


def run_routes(args: argparse.Namespace) -> None:
    registry = load_registry(args)

    # Build rows: (kind, path, resource, note)
    rows: list[tuple[str, str, str, str]] = []
    for entry, skip in StaticExporter(registry).plan():
        note = ""
        if skip is not None:
            note = f"skipped: {skip.reason}"
        elif entry.short_form:
            note = "short URL"
        label = Resolution(entry.kind, entry.ref).label
        rows.append((entry.kind.value, entry.path, label, note))

    # Column widths
    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
    max_name = max(max(len(r[2]) for r in rows), 8)  # "RESOURCE" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_path}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("KIND", "PATH", "RESOURCE", "NOTE").rstrip())
    print("-" * min(max_kind + max_path + max_name + 6, 80))
    for row in rows:
        print(fmt.format(*row).rstrip())
