import io

import pytest

from eloarg import ArgValueType, EloArg
from eloarg.cli import EXIT_FAILURE, exit_on_error, parse_or_exit, report
from eloarg.errors import MissingRequiredError


@pytest.fixture
def args():
    context = EloArg()
    context.add("h", "help", "Show help.", ArgValueType.INFO)
    context.add(None, "port", "Port.", ArgValueType.REQUIRED)
    return context


def test_parse_error_exits_with_failure(args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_or_exit(args, ["prog", "--bogus"])
    assert excinfo.value.code == EXIT_FAILURE
    err = capsys.readouterr().err
    assert err == "EloArg: Unknown option: --bogus.\nUse option '--help' for more information.\n"
    assert args.closed


def test_missing_required_exits_with_failure(args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_or_exit(args, ["prog"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("EloArg: Missing required option: '--port'")


def test_successful_parse_returns_context(args, capsys):
    assert parse_or_exit(args, ["prog", "--port", "80"]) is args
    assert args.get("port") == "80"
    assert capsys.readouterr().err == ""


def test_declaration_error_exits_with_failure(args, capsys):
    with pytest.raises(SystemExit) as excinfo:
        with exit_on_error(args):
            args.add("h", None, "Duplicate.")
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == "EloArg: You've already set the short option 'h'.\n"


def test_other_exceptions_pass_through(args):
    with pytest.raises(ValueError):
        with exit_on_error(args):
            raise ValueError("not ours")
    assert not args.closed


def test_report_writes_tagged_line():
    stream = io.StringIO()
    report(MissingRequiredError("-p"), stream)
    assert stream.getvalue().startswith("EloArg: Missing required option: '-p'")
