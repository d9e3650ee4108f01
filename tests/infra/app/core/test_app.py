"""
Tests for app/core/app.py.

Tests key functionality including:
- Command resolution and dispatch states
- Exit statuses for results and failures
- Context handed to handlers
- Global app handle
- Argument accessors
"""

from io import StringIO

import pytest

from liteapp.app.core.app import App, format_failure
from liteapp.app.testing import make_app, run_app
from liteapp.config import AppParams
from liteapp.exceptions import ApplicationError, ConfigError, HandlerError, UsageError
from liteapp.log.exceptions import InvalidLogLevelError
from liteapp.ui.console import Console


def greet(ctx):
    return 0


def fails_with(error):
    def handler(ctx):
        raise error

    return handler


# =============================================================================
# Test dispatch states
# =============================================================================


@pytest.mark.unit
class TestDispatchStates:
    """Test the dispatcher's resolution outcomes."""

    def test_no_command_shows_overview(self):
        """Test empty argument list renders overview with status 0."""
        status, output = run_app(["app"], {"greet": greet})

        assert status == 0
        assert "Usage: app COMMAND -h" in output
        assert "greet" in output

    def test_only_options_shows_overview(self):
        """Test options without a command render the overview."""
        status, output = run_app(["app", "--verbose"], {"greet": greet})

        assert status == 0
        assert "Usage: app COMMAND -h" in output

    def test_unknown_command(self):
        """Test unknown command renders overview with an error banner."""
        status, output = run_app(["app", "foo"], {"greet": greet})

        assert status == 0
        assert output.startswith("ERROR: The command 'foo' does not exist\n")
        assert "Usage: app COMMAND -h" in output

    def test_unknown_command_with_help_flag(self):
        """Test unknown command wins over the help flag."""
        status, output = run_app(["app", "foo", "--help"])

        assert status == 0
        assert "'foo' does not exist" in output

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help_flag(self, flag):
        """Test help flag renders command help without running the handler."""
        calls = []
        commands = {
            "greet": {"handler": lambda ctx: calls.append(1), "desc": "Say hello"}
        }

        status, output = run_app(["app", "greet", flag], commands)

        assert status == 0
        assert calls == []
        assert "Say hello" in output
        assert "Usage:" in output
        assert "app greet [args ...] [--opts ...]" in output

    def test_help_flag_does_not_consume_argument(self):
        """Test -h is a flag even when followed by a word."""
        app = make_app(["app", "greet", "-h", "world"], {"greet": greet})

        status = app.run(exit=False)

        assert status == 0
        assert app.opts["h"] is True
        assert app.args == ["world"]

    def test_command_name_trimmed(self):
        """Test surrounding whitespace is removed from the command name."""
        status, _ = run_app(["app", " greet "], {"greet": lambda ctx: 4})

        assert status == 4


# =============================================================================
# Test execution results
# =============================================================================


@pytest.mark.unit
class TestExecute:
    """Test handler execution outcomes."""

    def test_returned_status(self):
        """Test handler returning 7 yields status 7."""
        assert run_app(["app", "go"], {"go": lambda ctx: 7})[0] == 7

    def test_no_return_value(self):
        """Test handler returning nothing yields status 0."""
        assert run_app(["app", "go"], {"go": lambda ctx: None})[0] == 0

    def test_infinite_return_value(self):
        """Test an unconvertible float return exits 0 instead of raising."""
        status, output = run_app(["app", "x"], {"x": lambda ctx: float("inf")})

        assert status == 0
        assert output == ""

    def test_usage_error(self):
        """Test UsageError yields status 0 and one error line."""
        status, output = run_app(["app", "go"], {"go": fails_with(UsageError("bad input"))})

        assert status == 0
        assert output == "ERROR: bad input\n"

    def test_handler_error_code(self):
        """Test HandlerError carrying 3 yields status 3 and a diagnostic block."""
        status, output = run_app(
            ["app", "go"], {"go": fails_with(HandlerError("boom", code=3))}
        )

        assert status == 3
        assert output.startswith("Exception(3): HandlerError: boom\n")
        assert "\nFile: " in output
        assert "\nTrace:\n" in output
        assert "Traceback (most recent call last)" in output

    def test_unexpected_error(self):
        """Test other exceptions yield status -1."""
        status, output = run_app(["app", "go"], {"go": fails_with(RuntimeError("oops"))})

        assert status == -1
        assert "Exception(-1): RuntimeError: oops" in output

    def test_class_handler(self):
        """Test class handlers are instantiated and executed."""

        class Job:
            def execute(self, ctx):
                return len(ctx.args)

        assert run_app(["app", "job", "a", "b"], {"job": Job})[0] == 2

    def test_callable_object_handler(self):
        """Test callable instances are called."""

        class Handler:
            def __call__(self, ctx):
                return 9

        assert run_app(["app", "h"], {"h": Handler()})[0] == 9

    def test_registration_blocked_during_dispatch(self):
        """Test the registry cannot be changed through the app while dispatching."""
        errors = []

        def handler(ctx):
            try:
                ctx.app.add("late", greet)
            except ApplicationError as e:
                errors.append(e)
            return 0

        app = make_app(["app", "go"], {"go": handler})

        assert app.run(exit=False) == 0
        assert len(errors) == 1
        assert "late" not in app.registry

    def test_registration_allowed_after_dispatch(self):
        """Test the dispatching flag is cleared afterwards."""
        app = make_app(["app", "go"], {"go": greet})
        app.run(exit=False)

        app.add("later", greet)

        assert "later" in app.registry


# =============================================================================
# Test context
# =============================================================================


@pytest.mark.unit
class TestContext:
    """Test the context handed to handlers."""

    def test_context_contents(self):
        """Test context exposes invocation details."""
        seen = {}

        def handler(ctx):
            seen["ctx"] = ctx
            return 0

        app = make_app(
            ["bin/app", "sync", "src", "--tag=a", "--tag=b", "env=prod", "dst"],
            {"sync": handler},
        )
        app.run(exit=False)
        ctx = seen["ctx"]

        assert ctx.command == "sync"
        assert ctx.script == "bin/app"
        assert ctx.script_name == "app"
        assert ctx.args == ["src", "dst"]
        assert ctx.opts == {"tag": ["a", "b"], "env": "prod"}
        assert ctx.registry is app.registry
        assert ctx.app is app
        assert ctx.pwd == app.pwd


# =============================================================================
# Test run / stop
# =============================================================================


@pytest.mark.unit
class TestRunAndStop:
    """Test process termination."""

    def test_run_exits_with_status(self):
        """Test run() stops the process with the status by default."""
        app = make_app(["app", "go"], {"go": lambda ctx: 5})

        with pytest.raises(SystemExit) as exc_info:
            app.run()

        assert exc_info.value.code == 5

    def test_stop(self):
        """Test stop raises SystemExit."""
        with pytest.raises(SystemExit) as exc_info:
            make_app(["app"]).stop(2)

        assert exc_info.value.code == 2

    def test_find_command_once(self):
        """Test the command is extracted only once."""
        app = make_app(["app", "sync", "extra"])

        assert app.find_command() == "sync"
        assert app.find_command() == "sync"
        assert app.args == ["extra"]

    def test_dispatch_before_find_command_shows_overview(self):
        """Test dispatch without command extraction treats the run as commandless."""
        app = make_app(["app", "sync"], {"sync": lambda ctx: 3})

        assert app.dispatch(exit=False) == 0


# =============================================================================
# Test global app
# =============================================================================


@pytest.mark.unit
class TestGlobalApp:
    """Test the process-wide app handle."""

    def test_no_global_app(self):
        """Test accessor raises before any app exists."""
        with pytest.raises(ApplicationError):
            App.global_app()

    def test_first_app_wins(self):
        """Test later apps do not replace the first."""
        first = make_app(["app"])
        second = make_app(["app"])

        assert App.global_app() is first
        assert App.global_app() is not second

    def test_failed_construction_not_global(self):
        """Test an app that fails to build does not become global."""
        with pytest.raises(ConfigError):
            App({"unknown": 1}, ["app"])

        with pytest.raises(ApplicationError):
            App.global_app()


# =============================================================================
# Test params and accessors
# =============================================================================


@pytest.mark.unit
class TestParamsAndAccessors:
    """Test params handling and argument accessors."""

    def test_params_instance(self):
        """Test AppParams instance is used as is."""
        params = AppParams(desc="tool", version="")
        app = App(params, ["app"], console=Console(no_color=True, file=StringIO()))

        assert app.params is params

    def test_default_argv(self, monkeypatch):
        """Test sys.argv is used when argv is omitted."""
        monkeypatch.setattr("sys.argv", ["prog", "sync", "--x=1"])

        app = App(console=Console(no_color=True, file=StringIO()))

        assert app.script == "prog"
        assert app.find_command() == "sync"
        assert app.opts == {"x": "1"}

    def test_set_params_changes_overview(self):
        """Test set_params merges new values."""
        app = make_app(["app"])
        app.set_params(desc="renamed tool", version="9.9")

        app.run(exit=False)

        assert app.console.file.getvalue().startswith("Renamed tool (v9.9)")

    def test_set_params_invalid_log_level_keeps_state(self):
        """Test a rejected log level leaves params and logger unchanged."""
        app = make_app(["app"])
        params, lg = app.params, app.lg

        with pytest.raises(InvalidLogLevelError):
            app.set_params(desc="renamed tool", log_level="loud")

        assert app.params is params
        assert app.lg is lg
        assert app.params.log_level == "warning"

    def test_accessors(self):
        """Test typed accessors on the app."""
        app = make_app(["app", "cmd", "7", "word", "size=3", "--n=4", "-q", "--on=false"])
        app.find_command()

        assert app.get_arg(0) == "7"
        assert app.get_int_arg(0) == 7
        assert app.get_int_arg(1, 5) == 5
        assert app.get_str_arg(9, "none") == "none"
        assert app.get_arg("size") == "3"
        assert app.get_int_opt("n") == 4
        assert app.get_bool_opt("q") is True
        assert app.get_bool_opt("on") is False
        assert app.get_str_opt("missing", "d") == "d"
        assert app.script_name == "app"


# =============================================================================
# Test format_failure
# =============================================================================


@pytest.mark.unit
class TestFormatFailure:
    """Test the diagnostic block."""

    def test_includes_origin_and_cause(self):
        """Test block names origin and the causal chain."""
        try:
            try:
                raise KeyError("inner")
            except KeyError as e:
                raise HandlerError("outer", code=2) from e
        except HandlerError as err:
            block = format_failure(err, 2)

        lines = block.splitlines()
        assert lines[0] == "Exception(2): HandlerError: outer"
        assert lines[1].startswith("File: ") and lines[1].endswith(")")
        assert "test_app.py" in lines[1]
        assert lines[2] == "Trace:"
        assert "KeyError" in block

    def test_without_traceback(self):
        """Test exceptions that were never raised have an unknown origin."""
        block = format_failure(ValueError("x"), -1)

        assert "File: <unknown>(Line 0)" in block
