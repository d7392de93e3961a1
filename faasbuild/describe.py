"""Human-readable descriptions of deployed functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, TextIO, Tuple

_NONE = "<none>"


@dataclass
class FunctionUsage:
    """Resource usage reported for a function."""

    total_memory_bytes: float = 0.0
    cpu: float = 0.0


@dataclass
class FunctionResources:
    """CPU and memory figures for requests or limits."""

    cpu: str = ""
    memory: str = ""


@dataclass
class FunctionDescription:
    """Everything shown when describing a function."""

    name: str = ""
    image: str = ""
    status: str = ""
    replicas: int = 0
    available_replicas: int = 0
    invocation_count: int = 0
    env_process: str = ""
    url: str = ""
    async_url: str = ""
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    constraints: List[str] = field(default_factory=list)
    env_vars: Dict[str, str] = field(default_factory=dict)
    secrets: List[str] = field(default_factory=list)
    requests: Optional[FunctionResources] = None
    limits: Optional[FunctionResources] = None
    usage: Optional[FunctionUsage] = None


class _TabWriter:
    """Aligns tab-separated cells into columns padded with spaces.

    Leading empty cells produce no output, so they act as plain indentation
    markers while still taking part in column blocks.
    """

    def __init__(self, padding: int = 1) -> None:
        self._padding = padding
        self._chunks: List[str] = []

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def render(self) -> str:
        lines = [line.split("\t") for line in "".join(self._chunks).split("\n")]
        out: List[str] = []
        self._format(lines, 0, len(lines), [], out)
        return "\n".join(out)

    def _format(
        self,
        lines: List[List[str]],
        line0: int,
        line1: int,
        widths: List[int],
        out: List[str],
    ) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(lines[this]) - 1:
                this += 1
                continue
            self._write_lines(lines, line0, this, widths, out)
            line0 = this
            width = 0
            while this < line1 and column < len(lines[this]) - 1:
                width = max(width, len(lines[this][column]) + self._padding)
                this += 1
            self._format(lines, line0, this, widths + [width], out)
            line0 = this
        self._write_lines(lines, line0, line1, widths, out)

    @staticmethod
    def _write_lines(
        lines: List[List[str]],
        line0: int,
        line1: int,
        widths: Sequence[int],
        out: List[str],
    ) -> None:
        for cells in lines[line0:line1]:
            parts: List[str] = []
            leading = True
            for index, cell in enumerate(cells):
                if not cell:
                    if index < len(widths) and not leading:
                        parts.append(" " * widths[index])
                    continue
                leading = False
                parts.append(cell)
                if index < len(widths):
                    parts.append(" " * (widths[index] - len(cell)))
            out.append("".join(parts))


def get_function_urls(
    gateway: str, function_name: str, function_namespace: str
) -> Tuple[str, str]:
    """Return the synchronous and asynchronous invocation URLs."""
    base = gateway.rstrip("/")
    url = f"{base}/function/{function_name}"
    async_url = f"{base}/async-function/{function_name}"
    if function_namespace:
        url += f".{function_namespace}"
        async_url += f".{function_namespace}"
    return url, async_url


def generate_map_order(mapping: Mapping[str, str]) -> List[str]:
    """Return the keys of ``mapping`` in sorted order."""
    return sorted(mapping)


def _print_scalar(w: _TabWriter, label: str, value: str, verbose: bool) -> None:
    if not value:
        if not verbose:
            return
        value = _NONE
    w.write(f"{label}:\t{value}\n")


def _print_map(
    w: _TabWriter, name: str, mapping: Mapping[str, str], verbose: bool
) -> None:
    if not mapping:
        if verbose:
            w.write(f"{name}:\t {_NONE}\n")
        return
    w.write(f"{name}:\n")
    keys = generate_map_order(mapping) if name == "Environment" else list(mapping)
    for key in keys:
        w.write(f"\t {key}: {mapping[key]}\n")


def _print_list(w: _TabWriter, name: str, items: Sequence[str], verbose: bool) -> None:
    if not items:
        if verbose:
            w.write(f"{name}:\t {_NONE}\n")
        return
    w.write(f"{name}:\n")
    for item in items:
        w.write(f"\t - {item}\n")


def _print_resources(
    w: _TabWriter, name: str, resources: Optional[FunctionResources], verbose: bool
) -> None:
    if resources is None:
        if verbose:
            w.write(f"{name}:\t {_NONE}\n")
        return
    w.write(f"{name}:\n")
    w.write(f"\t CPU: {resources.cpu}\n")
    w.write(f"\t Memory: {resources.memory}\n")


def _print_usage(w: _TabWriter, usage: Optional[FunctionUsage], verbose: bool) -> None:
    if usage is None:
        if verbose:
            w.write(f"Usage:\t {_NONE}\n")
        return
    w.write("Usage:\n")
    w.write(f"  RAM:\t {usage.total_memory_bytes / 1024 / 1024:.2f} MB\n")
    cpu = usage.cpu if usage.cpu >= 0 else 1
    w.write(f"  CPU:\t {cpu:.0f} Mi\n")


def print_function_description(
    dst: TextIO, description: FunctionDescription, verbose: bool
) -> None:
    """Write an aligned description of a function to ``dst``.

    Empty fields are left out unless ``verbose`` is set, in which case they
    are shown as ``<none>``.
    """
    w = _TabWriter(padding=1)
    process = description.env_process or "<default>"

    _print_scalar(w, "Name", description.name, verbose)
    _print_scalar(w, "Status", description.status, verbose)
    _print_scalar(w, "Replicas", str(int(description.replicas)), verbose)
    _print_scalar(
        w, "Available Replicas", str(int(description.available_replicas)), verbose
    )
    _print_scalar(w, "Invocations", str(int(description.invocation_count)), verbose)
    _print_scalar(w, "Image", description.image, verbose)
    _print_scalar(w, "Function Process", process, verbose)
    _print_scalar(w, "URL", description.url, verbose)
    _print_scalar(w, "Async URL", description.async_url, verbose)
    _print_map(w, "Labels", description.labels or {}, verbose)
    _print_map(w, "Annotations", description.annotations or {}, verbose)
    _print_list(w, "Constraints", description.constraints, verbose)
    _print_map(w, "Environment", description.env_vars, verbose)
    _print_list(w, "Secrets", description.secrets, verbose)
    _print_resources(w, "Requests", description.requests, verbose)
    _print_resources(w, "Limits", description.limits, verbose)
    _print_usage(w, description.usage, verbose)

    dst.write(w.render())