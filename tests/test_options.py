import pytest

from mysqlop.options import Options, quoted


@pytest.mark.parametrize(
    "opts, expected",
    [
        (
            Options({"memberSslMode": "DISABLED", "ipWhitelist": "10.0.0.0/8"}),
            "{'memberSslMode': 'DISABLED', 'ipWhitelist': '10.0.0.0/8'}",
        ),
        (
            Options(
                {
                    "memberSslMode": "DISABLED",
                    "ipWhitelist": "10.0.0.0/8",
                    "force": "True",
                    "multiMaster": "True",
                }
            ),
            "{'memberSslMode': 'DISABLED', 'ipWhitelist': '10.0.0.0/8', "
            "'force': True, 'multiMaster': True}",
        ),
    ],
    ids=["string_only", "with_bool"],
)
def test_options_to_string(opts, expected):
    rendered = str(opts)
    parts = rendered.strip("{}").split(", ")
    assert len(parts) == len(opts)
    for key, value in opts.items():
        assert f"'{key}': {quoted(value)}" in parts
    assert rendered == expected


def test_empty_options():
    assert str(Options()) == "{}"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", "True"),
        ("TRUE", "True"),
        ("False", "False"),
        ("false", "False"),
        ("DISABLED", "'DISABLED'"),
        ("", "''"),
    ],
)
def test_quoted(value, expected):
    assert quoted(value) == expected


def test_false_option_rendered_bare():
    assert str(Options({"force": "false"})) == "{'force': False}"