import pytest

from faasbuild.deploy_flags import (
    DeployFlags,
    language_exists_not_dockerfile,
    resource_requests,
)
from faasbuild.describe import FunctionResources


def test_default_flags_update_without_replace():
    flags = DeployFlags()
    assert flags.update is True
    assert flags.replace is False
    assert flags.validate() is flags


def test_replace_without_update_is_valid():
    flags = DeployFlags(replace=True, update=False)
    assert flags.validate() is flags


def test_update_and_replace_conflict():
    flags = DeployFlags(replace=True, update=True)
    with pytest.raises(ValueError, match="cannot specify --update and --replace at the same time"):
        flags.validate()


def test_resource_requests_none_when_empty():
    assert resource_requests("", "", "", "") == (None, None)


def test_resource_requests_only_requests():
    requests, limits = resource_requests("100m", "", "128Mi", "")
    assert requests == FunctionResources(cpu="100m", memory="128Mi")
    assert limits is None


def test_resource_requests_only_limits():
    requests, limits = resource_requests("", "200m", "", "")
    assert requests is None
    assert limits == FunctionResources(cpu="200m", memory="")


def test_resource_requests_memory_alone_counts():
    requests, limits = resource_requests("", "", "64Mi", "256Mi")
    assert requests == FunctionResources(cpu="", memory="64Mi")
    assert limits == FunctionResources(cpu="", memory="256Mi")


@pytest.mark.parametrize(
    "language, expected",
    [
        ("node", True),
        ("python3", True),
        ("dockerfile", False),
        ("Dockerfile", False),
        ("", False),
    ],
)
def test_language_exists_not_dockerfile(language, expected):
    assert language_exists_not_dockerfile(language) is expected