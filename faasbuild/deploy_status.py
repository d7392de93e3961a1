"""Interpreting gateway status codes after deployments."""

from __future__ import annotations

from typing import Dict, Mapping

_OK_STATUSES = (200, 202)


class DeployFailedError(RuntimeError):
    """Raised when one or more functions failed to deploy."""

    def __init__(self, statuses: Mapping[str, int]) -> None:
        self.statuses: Dict[str, int] = dict(statuses)
        message = "\n".join(
            f"function '{name}' failed to deploy with status code: {code}"
            for name, code in self.statuses.items()
        )
        super().__init__(message)


def deploy_failed(status: Mapping[str, int]) -> None:
    """Raise DeployFailedError if any function is listed as failed."""
    if status:
        raise DeployFailedError(status)


def bad_status_code(status_code: int) -> bool:
    """True unless the status is 200 OK or 202 Accepted."""
    return status_code not in _OK_STATUSES