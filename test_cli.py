import pytest
from monkey import Interpreter
from monkey.cli import INTRO, MonkeyRepl, main, run_file, run_source, show_value
from monkey.objects import Array, Integer


def nested_array(depth):
    value = Array()
    for _ in range(depth):
        value = Array((value,))
    return value


class TestRunSource:
    def test_value(self, capsys):
        assert run_source(Interpreter(), "1 + 2", color=False) == Integer(3)
        assert capsys.readouterr().err == ""

    def test_parse_error(self, capsys):
        assert run_source(Interpreter(), "let x 5;", color=False) is None
        assert capsys.readouterr().err == "error: Expected next token to be '=', but got 'INT'.\n"

    def test_evaluation_error(self, capsys):
        assert run_source(Interpreter(), "1 + true", color=False) is None
        assert capsys.readouterr().err == "error: Type mismatch: 1 + true\n"

    def test_recursion_error(self, capsys):
        assert run_source(Interpreter(), "let f = fn(x) { f(x) }; f(1)", color=False) is None
        assert capsys.readouterr().err == "error: maximum recursion depth exceeded\n"

    def test_long_integer_literal(self, capsys):
        assert run_source(Interpreter(), "1" * 5000, color=False) == Integer((10 ** 5000 - 1) // 9)
        assert capsys.readouterr().err == ""

    def test_show(self, capsys):
        assert run_source(Interpreter(), "[1, 2]", color=False, show=show_value) is not None
        assert capsys.readouterr().out == "[1, 2]\n"

    def test_recursion_error_while_showing(self, capsys):
        interpreter = Interpreter()
        interpreter.env.set("deep", nested_array(100000))
        assert run_source(interpreter, "deep", color=False, show=show_value) is None
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "error: maximum recursion depth exceeded\n"

    def test_colored(self, capsys):
        run_source(Interpreter(), "nope", color=True)
        err = capsys.readouterr().err
        assert "error: " in err
        assert err.endswith("Identifier not found: nope\n")


class TestRunFile:
    def test_runs_file(self, tmp_path, capsys):
        path = tmp_path / "add.monkey"
        path.write_text("let add = fn(a, b) { a + b };\nadd(2, 3);\n")
        assert run_file(str(path), color=False) == 0
        assert capsys.readouterr().out == "5\n"

    def test_null_result_is_not_printed(self, tmp_path, capsys):
        path = tmp_path / "let.monkey"
        path.write_text("let x = 1;")
        assert run_file(str(path), color=False) == 0
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path, capsys):
        path = tmp_path / "missing.monkey"
        assert run_file(str(path), color=False) == 1
        assert capsys.readouterr().err == f"error: File not found: {path}\n"

    def test_wrong_extension(self, tmp_path, capsys):
        path = tmp_path / "prog.txt"
        path.write_text("1")
        assert run_file(str(path), color=False) == 1
        assert capsys.readouterr().err == "error: File must have a `.monkey` extension\n"

    def test_error_exit_status(self, tmp_path, capsys):
        path = tmp_path / "bad.monkey"
        path.write_text("let x = 1;\nx(2);")
        assert run_file(str(path), color=False) == 1
        assert capsys.readouterr().err == "error: Not a function: 1\n"

    def test_non_ascii_bytes(self, tmp_path, capsys):
        path = tmp_path / "utf8.monkey"
        path.write_bytes('len("café")'.encode("utf-8"))
        assert run_file(str(path), color=False) == 0
        # one character per byte
        assert capsys.readouterr().out == "5\n"

    def test_big_result(self, tmp_path, capsys):
        path = tmp_path / "big.monkey"
        path.write_text("let sq = fn(x, n) { if (n == 0) { x } else { sq(x * x, n - 1) } };\nsq(10, 13);\n")
        assert run_file(str(path), color=False) == 0
        assert capsys.readouterr().out == "1" + "0" * 8192 + "\n"

    def test_main(self, tmp_path, capsys):
        path = tmp_path / "main.monkey"
        path.write_text('len("four")')
        assert main([str(path), "--no-color"]) == 0
        assert capsys.readouterr().out == "4\n"


class TestRepl:
    @pytest.fixture(autouse=True)
    def set_repl(self):
        self.repl = MonkeyRepl(color=False)

    def test_keeps_bindings(self, capsys):
        assert self.repl.runsource("let a = 5;") is False
        self.repl.runsource("a * 2")
        assert capsys.readouterr().out == "null\n10\n"

    def test_continues_after_errors(self, capsys):
        self.repl.runsource("let = 1")
        self.repl.runsource("1 + true")
        self.repl.runsource('"ok"')
        captured = capsys.readouterr()
        assert captured.out == '"ok"\n'
        assert captured.err == (
            "error: Expected next token to be 'IDENT', but got '='.\n"
            "error: Type mismatch: 1 + true\n"
        )

    def test_deep_value_is_reported(self, capsys):
        self.repl.interpreter.env.set("deep", nested_array(100000))
        assert self.repl.runsource("deep") is False
        self.repl.runsource("1")
        captured = capsys.readouterr()
        assert captured.out == "1\n"
        assert captured.err == "error: maximum recursion depth exceeded\n"

    def test_interact(self, capsys, monkeypatch):
        lines = iter(["let double = fn(x) { x * 2 };", "double(21)"])

        def fake_input(prompt=""):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(self.repl, "raw_input", fake_input)
        self.repl.interact(banner=INTRO, exitmsg="")
        captured = capsys.readouterr()
        assert captured.out == "null\n42\n"
        assert INTRO in captured.err
