"""Collecting function environment variables from files and flags."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

import yaml


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError("environment values must be scalars")
    return str(value)


def read_files(files: Iterable[str]) -> Dict[str, str]:
    """Read the ``environment`` mapping of each YAML file and merge them.

    Later files override earlier ones. Scalars are kept as written.
    """
    envs: Dict[str, str] = {}
    for file in files:
        with open(file, "r", encoding="utf-8") as handle:
            document = yaml.load(handle, Loader=yaml.BaseLoader)
        if document in (None, ""):
            continue
        if not isinstance(document, dict):
            raise ValueError(f"environment file {file} must hold a mapping")
        environment = document.get("environment")
        if environment in (None, ""):
            continue
        if not isinstance(environment, dict):
            raise ValueError(f"environment in {file} must be a mapping")
        for key, value in environment.items():
            envs[str(key)] = _as_text(value)
    return envs


def _parse_envvars(opts: Iterable[str]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for opt in opts:
        key, sep, value = opt.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"error parsing envvars: {opt!r} must take the form KEY=VALUE")
        parsed[key] = value.strip()
    return parsed


def compile_environment(
    envvar_opts: Iterable[str],
    yaml_environment: Optional[Mapping[str, str]],
    file_environment: Optional[Mapping[str, str]],
) -> Dict[str, str]:
    """Merge environments: stack file, then env files, then ``KEY=VALUE`` flags.

    Each later source overrides the earlier ones.
    """
    arguments = _parse_envvars(envvar_opts)
    return {**(yaml_environment or {}), **(file_environment or {}), **arguments}