import pytest

from exprtree.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings == Settings(log_level="WARNING", output_format="text", ascii_tree=False)
    assert settings.show_tree


def test_environment_overrides():
    settings = Settings.from_env({
        "EXPRTREE_LOG_LEVEL": "debug",
        "EXPRTREE_FORMAT": "JSON",
        "EXPRTREE_ASCII_TREE": "yes",
    })
    assert settings.log_level == "DEBUG"
    assert settings.output_format == "json"
    assert settings.ascii_tree


@pytest.mark.parametrize("value, expected", [("1", True), ("on", True), ("0", False), ("", False)])
def test_ascii_flag(value, expected):
    assert Settings.from_env({"EXPRTREE_ASCII_TREE": value}).ascii_tree is expected


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("EXPRTREE_FORMAT", "json")
    assert Settings.from_env().output_format == "json"


@pytest.mark.parametrize("env", [{"EXPRTREE_FORMAT": "xml"}, {"EXPRTREE_LOG_LEVEL": "loud"}])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)
