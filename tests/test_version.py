from mysqlop import version


def test_default_build_version_is_empty():
    assert version.get_build_version() == ""


def test_build_version_reflects_configured_value(monkeypatch):
    monkeypatch.setattr(version, "_build_version", "1.2.3")
    assert version.get_build_version() == "1.2.3"