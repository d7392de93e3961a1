"""Options that control how functions are deployed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from faasbuild.describe import FunctionResources

_CONFLICT_HELP = """Cannot specify --update and --replace at the same time. One of --update or --replace must be false.
  --replace    removes an existing deployment before re-creating it
  --update     performs a rolling update to a new function image or configuration (default true)"""


@dataclass
class DeployFlags:
    """Deployment options given on the command line."""

    envvar_opts: List[str] = field(default_factory=list)
    replace: bool = False
    update: bool = True
    read_only_root_filesystem: bool = False
    constraints: List[str] = field(default_factory=list)
    secrets: List[str] = field(default_factory=list)
    label_opts: List[str] = field(default_factory=list)
    annotation_opts: List[str] = field(default_factory=list)

    def validate(self) -> "DeployFlags":
        """Return self, or raise ValueError when update and replace are both set."""
        if self.update and self.replace:
            print(_CONFLICT_HELP)
            raise ValueError("cannot specify --update and --replace at the same time")
        return self


def resource_requests(
    cpu_request: str, cpu_limit: str, memory_request: str, memory_limit: str
) -> Tuple[Optional[FunctionResources], Optional[FunctionResources]]:
    """Build (requests, limits); either is None when none of its values is set."""
    requests = None
    if cpu_request or memory_request:
        requests = FunctionResources(cpu=cpu_request, memory=memory_request)
    limits = None
    if cpu_limit or memory_limit:
        limits = FunctionResources(cpu=cpu_limit, memory=memory_limit)
    return requests, limits


def language_exists_not_dockerfile(language: str) -> bool:
    """True for a non-empty language other than the Dockerfile template."""
    return bool(language) and language.lower() != "dockerfile"