"""
Tests for the comment synthesizer.
"""

from codesynth.comments import property_comment, synthesize, text_comment
from codesynth.imports import ImportSet
from codesynth.model import Parameter, Property, SingleType, UnionType


class TestSynthesize:
    """Method comment synthesis."""

    def test_full_comment_ordering(self):
        imports = ImportSet()
        comment = synthesize(
            ["Sends a message."],
            [Parameter("to", "string"), Parameter("body")],
            SingleType("bool"),
            ["App\\Exceptions\\MailError", "RuntimeException"],
            imports=imports,
        )
        assert comment.lines == (
            "Sends a message.",
            "",
            "@param string to",
            "@param mixed body",
            "@throws MailError",
            "@throws RuntimeException",
            "@return bool",
        )
        assert comment.multiline
        assert imports.as_tuple() == ("App\\Exceptions\\MailError",)

    def test_no_separator_without_description(self):
        comment = synthesize([], [Parameter("id", "int")])
        assert comment.lines == ("@param int id",)

    def test_union_return(self):
        comment = synthesize(return_type=UnionType(("User", "null")))
        assert comment.lines == ("@return User|null",)

    def test_empty_comment_is_falsy(self):
        assert not synthesize()

    def test_single_line_flag_and_indentation(self):
        comment = synthesize(["Hi"], multiline=False, indentation="  ")
        assert not comment.multiline
        assert comment.indentation == "  "


class TestPropertyComment:
    """Property comments."""

    def test_typed_property_gets_var_line(self):
        comment = property_comment(Property("host", "string", description="Mail host."))
        assert comment.lines == ("Mail host.", "", "@var string")

    def test_undocumented_property_has_no_comment(self):
        assert not property_comment(Property("host", "string"))

    def test_constant_has_no_var_line(self):
        prop = Property("retries", "int", description="Retry count.").as_constant()
        assert property_comment(prop).lines == ("Retry count.",)


def test_text_comment():
    comment = text_comment(["A class."], multiline=False)
    assert comment.lines == ("A class.",)
    assert not comment.multiline
