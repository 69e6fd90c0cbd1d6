import pytest

from climber.command_spec import DEFAULT_COMMAND, CommandSpec, FlagSpec, ValueOptionSpec
from climber.exceptions import (
    MissingOptionValueError,
    TooManyArgumentsError,
    UnknownCommandError,
    UnknownOptionError,
)
from climber.matcher import ArgumentMatcher
from climber.registry import CommandRegistry
from climber.tokens import (
    CommandSelector,
    DefaultCommandState,
    OptionFlag,
    PositionalValue,
    classify,
)


def noop(args, flags, options):
    return None


def build_matcher(default_command=None):
    registry = CommandRegistry()
    registry.register(
        CommandSpec("add", noop, short_alias="a", positional_names=["x", "y"])
    )
    registry.register(
        CommandSpec(
            "div",
            noop,
            positional_names=["x", "y"],
            flags=[FlagSpec("round", "r")],
            value_options=[ValueOptionSpec("precision", "p", value_name="DIGITS")],
        )
    )
    registry.register(
        CommandSpec("greet", noop, value_options=[ValueOptionSpec("name", "n")])
    )
    if default_command:
        return ArgumentMatcher(registry, registry.resolve(default_command))
    return ArgumentMatcher(registry)


def match(args, default_command=None):
    state = DefaultCommandState.SET if default_command else DefaultCommandState.UNSET
    return build_matcher(default_command).match(classify(args, state))


def test_command_selector_switches_active_command():
    result = match(["add", "3", "4"])
    assert result.command.primary_alias == "add"
    assert result.positional_values == ("3", "4")


def test_short_command_alias():
    result = match(["a", "3", "4"])
    assert result.command.primary_alias == "add"


def test_unknown_command():
    with pytest.raises(UnknownCommandError) as exc_info:
        match(["bogus", "1"])
    assert exc_info.value.alias == "bogus"
    assert exc_info.value.command is None


def test_flags_by_long_and_short_alias():
    assert match(["div", "--round", "10", "3"]).flags_triggered == {"round"}
    assert match(["div", "-r", "10", "3"]).flags_triggered == {"round"}


def test_flags_are_order_independent():
    assert match(["div", "10", "3", "--round"]).flags_triggered == {"round"}
    assert match(["div", "10", "-r", "3"]).flags_triggered == {"round"}


def test_flag_idempotence():
    once = match(["div", "--round", "10", "3"])
    twice = match(["div", "--round", "-r", "10", "3", "--round"])
    assert once.flags_triggered == twice.flags_triggered


def test_untriggered_flags_are_absent():
    result = match(["div", "10", "3"])
    assert result.flags_triggered == frozenset()
    assert result.value_options_supplied == {}


def test_value_option_by_long_and_short_alias():
    result = match(["div", "--precision", "2", "10", "3"])
    assert result.value_options_supplied == {"precision": "2"}
    result = match(["div", "10", "-p", "4", "3"])
    assert result.value_options_supplied == {"precision": "4"}
    assert result.positional_values == ("10", "3")


def test_value_option_last_value_wins():
    result = match(["div", "-p", "1", "--precision", "5", "10", "3"])
    assert result.value_options_supplied == {"precision": "5"}


def test_value_option_consumes_option_looking_token():
    result = match(["greet", "--name", "-x"])
    assert result.value_options_supplied == {"name": "-x"}
    assert result.flags_triggered == frozenset()


def test_value_option_consumes_help_looking_token():
    result = match(["greet", "--name", "--help"])
    assert result.value_options_supplied == {"name": "--help"}
    assert "help" not in result.flags_triggered


def test_value_option_consumes_command_selector_token():
    matcher = build_matcher()
    result = matcher.match(
        [CommandSelector("greet"), OptionFlag("-n"), CommandSelector("add")]
    )
    assert result.command.primary_alias == "greet"
    assert result.value_options_supplied == {"name": "add"}


def test_missing_option_value_at_end_of_input():
    with pytest.raises(MissingOptionValueError) as exc_info:
        match(["greet", "--name"])
    assert exc_info.value.alias == "name"
    assert exc_info.value.value_name == "VALUE"
    assert exc_info.value.command.primary_alias == "greet"


def test_missing_option_value_reports_primary_alias_for_short():
    with pytest.raises(MissingOptionValueError) as exc_info:
        match(["div", "10", "3", "-p"])
    assert exc_info.value.alias == "precision"
    assert "DIGITS" in str(exc_info.value)


def test_unknown_option():
    with pytest.raises(UnknownOptionError) as exc_info:
        match(["div", "--bogus", "10", "3"])
    assert exc_info.value.alias == "bogus"
    assert exc_info.value.token == "--bogus"
    assert exc_info.value.command.primary_alias == "div"


def test_unknown_option_is_never_positional():
    with pytest.raises(UnknownOptionError):
        match(["add", "3", "-4"])


def test_option_of_other_command_is_unknown():
    with pytest.raises(UnknownOptionError):
        match(["add", "--round", "3", "4"])


def test_too_many_arguments_aborts_immediately():
    with pytest.raises(TooManyArgumentsError) as exc_info:
        match(["add", "1", "2", "3", "--bogus"])
    assert exc_info.value.expected == 2
    assert exc_info.value.actual == 3


def test_builtin_help_flag_on_every_command():
    result = build_matcher().match([CommandSelector("greet"), OptionFlag("-h")])
    assert result.flags_triggered == {"help"}
    result = match(["add", "--help", "1", "2"])
    assert result.flags_triggered == {"help"}


def test_default_command_is_builtin_without_configuration():
    result = match(["--version"])
    assert result.command is DEFAULT_COMMAND
    assert result.flags_triggered == {"version"}
    assert match([]).command is DEFAULT_COMMAND


def test_builtin_default_rejects_unknown_option():
    with pytest.raises(UnknownOptionError):
        match(["--bogus"])


def test_positional_for_builtin_default_is_too_many():
    matcher = build_matcher()
    with pytest.raises(TooManyArgumentsError):
        matcher.match([PositionalValue("3")])


def test_configured_default_command_takes_first_token_as_data():
    result = match(["3", "4"], default_command="add")
    assert result.command.primary_alias == "add"
    assert result.positional_values == ("3", "4")


def test_configured_default_command_has_no_command_selection():
    with pytest.raises(TooManyArgumentsError):
        match(["add", "3", "4"], default_command="add")


def test_matcher_is_reusable():
    matcher = build_matcher()
    state = DefaultCommandState.UNSET
    first = matcher.match(classify(["div", "-r", "1", "2"], state))
    second = matcher.match(classify(["div", "1", "2"], state))
    assert first.flags_triggered == {"round"}
    assert second.flags_triggered == frozenset()
