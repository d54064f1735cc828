import pytest

from barstatus import config
from barstatus.cli import Options, main, parse_args, render
from barstatus.config import StatusArg
from barstatus.util import StatusError


def test_parse_no_flags():
    assert parse_args([]) == Options(stdout=False, once=False)


def test_parse_stdout_flag():
    assert parse_args(["-s"]) == Options(stdout=True, once=False)


def test_parse_once_implies_stdout():
    assert parse_args(["-1"]) == Options(stdout=True, once=True)


def test_parse_combined_flags():
    assert parse_args(["-s1"]) == Options(stdout=True, once=True)
    assert parse_args(["-s", "-1"]) == Options(stdout=True, once=True)


def test_parse_double_dash_ends_flags():
    assert parse_args(["-s", "--"]) == Options(stdout=True, once=False)


def test_parse_operand_after_double_dash_is_usage_error():
    with pytest.raises(StatusError, match="usage"):
        parse_args(["--", "-s"])


@pytest.mark.parametrize("argv", [["-x"], ["extra"], ["-"], ["-s", "extra"]])
def test_parse_usage_errors(argv):
    with pytest.raises(StatusError, match=r"\[-v\] \[-s\] \[-1\]"):
        parse_args(argv)


def test_parse_version():
    with pytest.raises(StatusError, match="-1.1"):
        parse_args(["-v"])


def test_parse_version_stops_before_later_errors():
    with pytest.raises(StatusError, match="-1.1"):
        parse_args(["-v", "-x"])


def test_render_joins_formatted_pieces():
    args = [
        StatusArg(lambda value: value.upper(), "%s|", "abc"),
        StatusArg(lambda value: value, "%s%%", "50"),
    ]
    assert render(args, "n/a") == "ABC|50%"


def test_render_uses_unknown_for_missing_values():
    args = [StatusArg(lambda value: None, " (%s)|", "BAT0")]
    assert render(args, "n/a") == " (n/a)|"


def test_render_keeps_empty_results():
    args = [StatusArg(lambda value: "", "[%s]", None)]
    assert render(args, "n/a") == "[]"


def test_render_stops_at_maximum_length():
    long_text = "x" * (config.MAXLEN - 1)
    args = [
        StatusArg(lambda value: "ok", "%s", None),
        StatusArg(lambda value: long_text, "%s", None),
        StatusArg(lambda value: "never", "%s", None),
    ]
    result = render(args, "n/a")
    assert result == "ok"
    assert len(result) < config.MAXLEN


def test_render_stops_on_bad_format():
    args = [
        StatusArg(lambda value: "a", "%s", None),
        StatusArg(lambda value: "b", "%d", None),
        StatusArg(lambda value: "c", "%s", None),
    ]
    assert render(args, "n/a") == "a"


def test_main_version_exits_with_error(capsys):
    assert main(["-v"]) == 1
    assert "-1.1" in capsys.readouterr().err


def test_main_usage_error(capsys):
    assert main(["bogus"]) == 1
    assert capsys.readouterr().err.startswith("usage:")


def test_main_once_prints_single_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 1
    assert lines[0].count("|") == 2