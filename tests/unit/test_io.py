"""
Unit tests for the io module.
"""

from primlib.runtime.stdlib.io import print as print_values
from primlib.runtime.stdlib.io import read_line


class TestPrint:
    """Tests for print."""

    def test_mixed_values(self, context, output):
        """Test values are space-separated with one trailing newline."""
        print_values(1, "a", False, context=context)
        assert output() == "1 a false\n"

    def test_no_values(self, context, output):
        """Test an empty call writes just a newline."""
        print_values(context=context)
        assert output() == "\n"

    def test_negative_and_true(self, context, output):
        """Test negative integers and true."""
        print_values(-7, True, context=context)
        assert output() == "-7 true\n"

    def test_successive_lines(self, context, output):
        """Test each call writes its own line."""
        print_values("x", context=context)
        print_values("y", context=context)
        assert output() == "x\ny\n"

    def test_default_stdout(self, capsys):
        """Test the default context writes to sys.stdout."""
        print_values(42, "z")
        assert capsys.readouterr().out == "42 z\n"


class TestReadLine:
    """Tests for read_line."""

    def test_reads_one_line(self, context_factory):
        """Test one line is returned without its newline."""
        ctx = context_factory("first\nsecond\n")
        assert read_line(context=ctx) == "first"
        assert read_line(context=ctx) == "second"

    def test_end_of_input(self, context_factory):
        """Test end of input yields empty text."""
        ctx = context_factory("only\n")
        assert read_line(context=ctx) == "only"
        assert read_line(context=ctx) == ""

    def test_last_line_without_newline(self, context_factory):
        """Test a final unterminated line is returned whole."""
        ctx = context_factory("tail")
        assert read_line(context=ctx) == "tail"

    def test_crlf(self, context_factory):
        """Test a Windows line ending is stripped."""
        ctx = context_factory("name\r\n")
        assert read_line(context=ctx) == "name"

    def test_prompt(self, context_factory):
        """Test a prompt is written without a newline."""
        ctx = context_factory("Ada\n")
        assert read_line("Enter name: ", context=ctx) == "Ada"
        assert ctx.stdout.getvalue() == "Enter name: "

    def test_empty_prompt_writes_nothing(self, context_factory):
        """Test the empty prompt writes nothing."""
        ctx = context_factory("x\n")
        read_line(context=ctx)
        assert ctx.stdout.getvalue() == ""
