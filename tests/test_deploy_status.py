import pytest

from faasbuild.deploy_status import DeployFailedError, bad_status_code, deploy_failed


def test_deploy_failed_reports_every_code():
    failed = {"example1": 100, "example2": 300, "example3": 400, "example4": 500}
    with pytest.raises(DeployFailedError) as info:
        deploy_failed(failed)
    message = str(info.value)
    contained = sum(1 for code in failed.values() if str(code) in message)
    assert contained == len(failed)
    assert info.value.statuses == failed


def test_deploy_failed_message_format():
    with pytest.raises(DeployFailedError) as info:
        deploy_failed({"example1": 500})
    assert str(info.value) == "function 'example1' failed to deploy with status code: 500"


def test_deploy_succeeded():
    assert deploy_failed({}) is None


@pytest.mark.parametrize(
    "code, expected",
    [(200, False), (202, False), (300, True)],
)
def test_bad_status_code(code, expected):
    assert bad_status_code(code) is expected