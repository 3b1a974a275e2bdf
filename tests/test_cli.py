from click.testing import CliRunner
from typer.testing import CliRunner as TyperRunner

from sansu.cmd.main import app
from sansu.main import main


def test_main_reads_stdin():
    result = CliRunner().invoke(main, input="(5 + 4) * 6 + 53 * 532 / 32\n")
    assert result.exit_code == 0
    assert result.output == "Result = 935\n"


def test_main_reads_file_and_writes_output(tmp_path):
    source = tmp_path / "expression.txt"
    source.write_text("1 + 2 * 3\n")
    target = tmp_path / "result.txt"
    result = CliRunner().invoke(main, [str(source), "-o", str(target)])
    assert result.exit_code == 0
    assert target.read_text() == "Result = 7\n"


def test_main_reports_errors():
    result = CliRunner().invoke(main, input="10 / 0\n")
    assert result.exit_code == 1
    assert "^ division by zero" in result.output
    assert "Result" not in result.output


def test_eval_command():
    result = TyperRunner().invoke(app, ["(1 + 2) * 3"])
    assert result.exit_code == 0
    assert result.output == "Result = 9\n"


def test_eval_command_tokens():
    result = TyperRunner().invoke(app, ["--tokens", "1+22"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Numeric '1' 0",
        "Punctuator '+' 1",
        "Numeric '22' 2",
        "EOF '' 4",
    ]


def test_eval_command_reports_errors():
    result = TyperRunner().invoke(app, ["1 2"])
    assert result.exit_code == 1
    assert "unexpected Numeric '2' after expression" in result.output


def test_eval_command_reports_scanner_errors():
    result = TyperRunner().invoke(app, ["--tokens", "1 ? 2"])
    assert result.exit_code == 1
    assert "unrecognized character '?'" in result.output


LONG_PRODUCT = f"{'9' * 3000} * 1{'0' * 3000} + {'9' * 3000}"


def test_main_prints_results_past_int_string_limit():
    result = CliRunner().invoke(main, input=LONG_PRODUCT + "\n")
    assert result.exit_code == 0
    assert result.output == "Result = " + "9" * 6000 + "\n"


def test_eval_command_prints_results_past_int_string_limit():
    result = TyperRunner().invoke(app, [LONG_PRODUCT])
    assert result.exit_code == 0
    assert result.output == "Result = " + "9" * 6000 + "\n"


def test_main_reports_deep_nesting():
    depth = 5000
    result = CliRunner().invoke(main, input="(" * depth + "1" + ")" * depth + "\n")
    assert result.exit_code == 1
    assert "^ expression nested too deeply" in result.output


def test_eval_command_reports_deep_nesting():
    depth = 5000
    result = TyperRunner().invoke(app, ["(" * depth + "1" + ")" * depth])
    assert result.exit_code == 1
    assert "expression nested too deeply" in result.output
