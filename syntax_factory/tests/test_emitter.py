import unittest
from unittest import TestCase

from syntax_factory.emitter import TextWriter


class TestTextWriter(TestCase):
    def setUp(self):
        self.writer = TextWriter()

    def test_lines_are_joined_with_newlines(self):
        self.writer.write_line("a")
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\nb")

    def test_pending_newline_not_written_at_end(self):
        self.writer.write_line("a")
        self.writer.write_line()
        self.assertEqual(self.writer.getvalue(), "a\n")
        self.assertFalse(self.writer.getvalue().endswith("\n\n"))

    def test_write_continues_current_line(self):
        self.writer.write("a")
        self.writer.write("b")
        self.writer.write_line("c")
        self.writer.write("d")
        self.assertEqual(self.writer.getvalue(), "abc\nd")

    def test_single_blank_line(self):
        self.writer.write_line("a")
        self.writer.write_line()
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\n\nb")

    def test_repeated_blank_lines_collapse(self):
        self.writer.write_line("a")
        self.writer.write_line()
        self.writer.write_line()
        self.writer.write_line()
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\n\nb")

    def test_blank_line_request_on_empty_writer(self):
        self.writer.write_line()
        self.assertEqual(self.writer.getvalue(), "")
        self.writer.write("a")
        self.assertEqual(self.writer.getvalue(), "\na")

    def test_indentation_applies_to_next_line(self):
        self.writer.write_line("{")
        self.writer.indent()
        self.writer.write_line("body;")
        self.writer.dedent()
        self.writer.write_line("}")
        self.assertEqual(self.writer.getvalue(), "{\n    body;\n}")

    def test_depth_taken_when_line_starts(self):
        self.writer.write_line("a")
        self.writer.indent()
        self.writer.indent()
        self.writer.dedent()
        self.writer.write("b")
        self.assertEqual(self.writer.getvalue(), "a\n    b")

    def test_nested_indent_levels(self):
        self.writer.write_line("0")
        for _ in range(3):
            self.writer.indent()
        self.writer.write_line("3")
        self.assertEqual(self.writer.getvalue(), "0\n            3")

    def test_blank_lines_carry_no_indentation(self):
        self.writer.indent()
        self.writer.write_line("a")
        self.writer.write_line()
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\n\n    b")

    def test_dedent_saturates_at_zero(self):
        self.writer.dedent()
        self.writer.dedent()
        self.assertEqual(self.writer.indent_depth, 0)
        self.writer.write_line("a")
        self.writer.indent()
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\n    b")

    def test_suspended_indenting(self):
        self.writer.write_line("a")
        self.writer.indent()
        self.writer.suspend_indenting()
        self.writer.write_line("b")
        self.writer.resume_indenting()
        self.writer.write_line("c")
        self.assertEqual(self.writer.getvalue(), "a\nb\n    c")

    def test_resume_saturates_at_zero(self):
        self.writer.resume_indenting()
        self.writer.suspend_indenting()
        self.writer.write_line("a")
        self.writer.indent()
        self.writer.write_line("b")
        self.assertEqual(self.writer.getvalue(), "a\nb")

    def test_multiline_text_is_indented_per_line(self):
        self.writer.write_line("{")
        self.writer.indent()
        self.writer.write_line("x;\r\ny;\rz;")
        self.assertEqual(self.writer.getvalue(), "{\n    x;\n    y;\n    z;")

    def test_empty_write_is_ignored(self):
        self.writer.write_line("a")
        self.writer.write("")
        self.writer.write(None)
        self.assertEqual(self.writer.getvalue(), "a")

    def test_custom_indent_and_newline(self):
        writer = TextWriter(indent_unit="\t", newline="\r\n")
        writer.write_line("a")
        writer.indent()
        writer.write_line("b")
        self.assertEqual(writer.getvalue(), "a\r\n\tb")

    def test_same_operations_same_text(self):
        def run():
            writer = TextWriter()
            writer.write_line("a")
            writer.indent()
            writer.write_line()
            writer.write("b, ")
            writer.write_line("c")
            return writer.getvalue()

        self.assertEqual(run(), run())


if __name__ == "__main__":
    unittest.main()
