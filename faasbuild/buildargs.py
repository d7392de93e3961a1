"""Parsing and validation of build command arguments."""

from __future__ import annotations

from typing import Dict, Iterable, List

ADDITIONAL_PACKAGE_BUILD_ARG = "ADDITIONAL_PACKAGE"


def parse_build_args(args: Iterable[str]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a mapping.

    Values for the additional-package argument accumulate, separated by
    spaces; any other repeated key keeps its last value.
    """
    mapped: Dict[str, str] = {}
    for kvp in args:
        key, sep, value = kvp.partition("=")
        if not sep:
            raise ValueError("each build-arg must take the form key=value")
        key = key.strip()
        value = value.strip()
        if not key:
            raise ValueError("build-arg must have a non-empty key")
        if not value:
            raise ValueError("build-arg must have a non-empty value")
        if key == ADDITIONAL_PACKAGE_BUILD_ARG and mapped.get(key):
            mapped[key] = f"{mapped[key]} {value}"
        else:
            mapped[key] = value
    return mapped


def validate_parallel(parallel: int) -> int:
    """Return ``parallel`` if it is a usable build depth, else raise."""
    if parallel < 1:
        raise ValueError("the --parallel flag must be great than 0")
    return parallel


def combine_build_opts(
    yaml_build_opts: Iterable[str], flag_build_opts: Iterable[str]
) -> List[str]:
    """Merge build options from the stack file with those from flags.

    Order is kept, stack-file options first, and repeats are dropped.
    """
    return list(dict.fromkeys([*yaml_build_opts, *flag_build_opts]))