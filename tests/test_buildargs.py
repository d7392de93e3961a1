import pytest

from faasbuild.buildargs import (
    ADDITIONAL_PACKAGE_BUILD_ARG,
    combine_build_opts,
    parse_build_args,
    validate_parallel,
)


def test_parse_build_args_valid_parts():
    assert parse_build_args(["k=v"]) == {"k": "v"}


def test_parse_build_args_no_separator():
    with pytest.raises(ValueError, match="each build-arg must take the form key=value"):
        parse_build_args(["kv"])


def test_parse_build_args_empty_key():
    with pytest.raises(ValueError) as excinfo:
        parse_build_args(["=v"])
    assert str(excinfo.value) == "build-arg must have a non-empty key"


def test_parse_build_args_empty_value():
    with pytest.raises(ValueError) as excinfo:
        parse_build_args(["k=  "])
    assert str(excinfo.value) == "build-arg must have a non-empty value"


def test_parse_build_args_multiple_separators():
    assert parse_build_args(["k=v=z"])["k"] == "v=z"


def test_parse_build_args_trims_whitespace():
    assert parse_build_args([" key = value "]) == {"key": "value"}


def test_parse_build_args_last_value_wins():
    assert parse_build_args(["k=a", "k=b"]) == {"k": "b"}


def test_parse_build_args_additional_package_accumulates():
    mapped = parse_build_args(
        [f"{ADDITIONAL_PACKAGE_BUILD_ARG}=curl", f"{ADDITIONAL_PACKAGE_BUILD_ARG}=jq"]
    )
    assert mapped == {ADDITIONAL_PACKAGE_BUILD_ARG: "curl jq"}


def test_parse_build_args_empty():
    assert parse_build_args([]) == {}


def test_validate_parallel_zero():
    with pytest.raises(ValueError) as excinfo:
        validate_parallel(0)
    assert str(excinfo.value) == "the --parallel flag must be great than 0"


def test_validate_parallel_negative():
    with pytest.raises(ValueError):
        validate_parallel(-3)


def test_validate_parallel_positive():
    assert validate_parallel(4) == 4


def test_combine_build_opts_keeps_order_and_drops_repeats():
    combined = combine_build_opts(["dev", "debug"], ["debug", "extra"])
    assert combined == ["dev", "debug", "extra"]


def test_combine_build_opts_empty_inputs():
    assert combine_build_opts([], []) == []