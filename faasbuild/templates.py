"""Installing language templates from a fetched template repository."""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Tuple

from faasbuild.fileops import copy_files

DEFAULT_TEMPLATE_DIRECTORY = "./template/"
REPOSITORY_TEMPLATE_FOLDER = "template"


def template_folder_exists(
    language: str,
    overwrite: bool = False,
    template_directory: str = DEFAULT_TEMPLATE_DIRECTORY,
) -> bool:
    """True when the template for ``language`` may be written.

    That is the case when no folder for it exists yet, or when
    ``overwrite`` is set.
    """
    if overwrite:
        return True
    return not os.path.exists(os.path.join(template_directory, language))


def can_write_language(
    available_languages: Optional[Dict[str, bool]],
    language: str,
    overwrite: bool = False,
    template_directory: str = DEFAULT_TEMPLATE_DIRECTORY,
) -> bool:
    """Tell whether ``language`` may be written, remembering the answer.

    ``available_languages`` caches earlier decisions; a cached entry is
    returned as is. Without a cache or a language the answer is False.
    """
    if available_languages is None or not language:
        return False
    if language in available_languages:
        return available_languages[language]
    can_write = template_folder_exists(language, overwrite, template_directory)
    available_languages[language] = can_write
    return can_write


def move_templates(
    repo_path: str,
    template_name: str = "",
    overwrite: bool = False,
    template_directory: str = DEFAULT_TEMPLATE_DIRECTORY,
) -> Tuple[List[str], List[str]]:
    """Copy templates from ``repo_path/template`` into ``template_directory``.

    With an empty ``template_name`` every template is considered, otherwise
    only the one of that name. Returns the languages that were left alone
    because they already exist, and the languages that were written.
    """
    source_root = os.path.join(repo_path, REPOSITORY_TEMPLATE_FOLDER)
    try:
        entries = sorted(os.scandir(source_root), key=lambda entry: entry.name)
    except OSError as exc:
        raise FileNotFoundError(f"can't find templates in: {repo_path}") from exc

    available: Dict[str, bool] = {}
    existing: List[str] = []
    fetched: List[str] = []

    for entry in entries:
        if not entry.is_dir():
            continue
        language = entry.name
        if template_name and language != template_name:
            continue

        if can_write_language(available, language, overwrite, template_directory):
            fetched.append(language)
            copy_files(
                os.path.join(source_root, language),
                os.path.join(template_directory, language),
            )
        elif not template_name:
            existing.append(language)

    return existing, fetched