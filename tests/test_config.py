import pytest
from pydantic import ValidationError

from climber.config import ClimberConfig, loader
from climber.exceptions import ConfigError, RegistrationError

HANDLERS = """
def add(args, flags, options):
    return str(int(args[0]) + int(args[1]))


def div(args, flags, options):
    result = int(args[0]) / int(args[1])
    if "round" in flags:
        return str(round(result))
    return str(result)


NOT_CALLABLE = 42
"""

YAML_CONFIG = """
name: calc
description: A tiny calculator
version: 1.0.0
commands:
  - alias: add
    short_alias: a
    description: Add two numbers
    handler: calc_handlers.add
    arguments: [x, y]
  - alias: div
    description: Divide two numbers
    handler: calc_handlers:div
    arguments: [x, y]
    flags:
      - alias: round
        short_alias: r
        description: Round the result
    options:
      - alias: precision
        value_name: DIGITS
"""

TOML_CONFIG = """
name = "calc"
version = "2.0.0"
default_command = "add"

[[commands]]
alias = "add"
description = "Add two numbers"
handler = "calc_handlers.add"
arguments = ["x", "y"]
"""


@pytest.fixture
def handlers_module(tmp_path, monkeypatch):
    (tmp_path / "calc_handlers.py").write_text(HANDLERS)
    monkeypatch.syspath_prepend(str(tmp_path))
    return tmp_path


def write(path, text):
    path.write_text(text)
    return path


def test_load_yaml(handlers_module):
    app = loader(write(handlers_module / "climber.yaml", YAML_CONFIG))
    assert app.name == "calc"
    assert app.version == "1.0.0"
    assert [command.primary_alias for command in app.registry] == ["add", "div"]
    assert app.parse_and_dispatch(["a", "9", "10"]) == "19"
    assert app.parse_and_dispatch(["div", "-r", "10", "3"]) == "3"
    div = app.registry.resolve("div")
    assert div.value_options[0].value_name == "DIGITS"


def test_load_toml_with_default_command(handlers_module):
    app = loader(str(write(handlers_module / "climber.toml", TOML_CONFIG)))
    assert app.has_default_command
    assert app.description == "default_description"
    assert app.parse_and_dispatch(["3", "4"]) == "7"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path / "climber.json", "{}"))


def test_unparsable_yaml(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path / "climber.yaml", "commands: [unclosed"))


def test_non_mapping_config(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path / "climber.yaml", "- just\n- a list\n"))


def test_invalid_config(tmp_path):
    with pytest.raises(ConfigError):
        loader(write(tmp_path / "climber.yaml", "commands:\n  - alias: add\n"))


def test_unknown_default_command():
    with pytest.raises(ValidationError):
        ClimberConfig.model_validate(
            {"default_command": "mul", "commands": [{"alias": "add", "handler": "x.y"}]}
        )


@pytest.mark.parametrize(
    "handler",
    [
        "calc_handlers.missing",
        "no_such_module_xyz.add",
        "calc_handlers:NOT_CALLABLE",
    ],
)
def test_unresolvable_handler(handlers_module, handler):
    config = f"commands:\n  - alias: add\n    handler: {handler}\n"
    with pytest.raises(ConfigError):
        loader(write(handlers_module / "climber.yaml", config))


def test_registration_rules_apply(handlers_module):
    config = "commands:\n  - alias: help\n    handler: calc_handlers.add\n"
    with pytest.raises(RegistrationError):
        loader(write(handlers_module / "climber.yaml", config))


def test_help_texts_from_config(handlers_module):
    config = (
        "name: calc\n"
        "help_commands: 'Available commands:'\n"
        "help_footer: See the manual.\n"
        "commands:\n"
        "  - alias: add\n"
        "    handler: calc_handlers.add\n"
    )
    app = loader(write(handlers_module / "climber.yaml", config))
    assert app.help_commands == "Available commands:"
    assert app.help_footer == "See the manual."
    assert app.help_usage == "calc [OPTIONS] [COMMAND]"


@pytest.mark.parametrize("suffix", [".yaml", ".toml"])
def test_undecodable_file(tmp_path, suffix):
    path = tmp_path / f"climber{suffix}"
    path.write_bytes(b"name: \xff\xfe\n")
    with pytest.raises(ConfigError):
        loader(path)
