"""Path parameter parsing and type conversion.

Built-in converters for path segments such as the ``<id>`` in
``/provider/<id>/<slug>``.
"""

import re

# (regex_pattern, python_type) for each supported converter
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"\d+", int),
}

_COMPILED: dict[str, re.Pattern[str]] = {
    name: re.compile(f"^{pattern}$", re.ASCII) for name, (pattern, _) in CONVERTERS.items()
}


def convert_param(value: str, param_type: str) -> str | int:
    """Convert a captured path segment to the target type.

    Raises ``ValueError`` if the string does not match the converter's pattern.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    _, target_type = CONVERTERS[param_type]
    if not _COMPILED[param_type].match(value):
        msg = f"{value!r} is not a valid {param_type} path parameter"
        raise ValueError(msg)
    return target_type(value)
