"""Tests for resolving one path against another."""

from pathmodel import parse, resolve, resolve_normalized


class TestResolve:
    def test_relative_other_is_appended(self):
        base = parse("/a/b/")
        other = parse("c/d.txt")
        result = base.resolve(other)
        assert result.folder == base.folder + other.folder
        assert result.file == other.file
        assert result.is_absolute is True
        assert result.complete == "/a/b/c/d.txt"

    def test_base_file_is_replaced(self):
        result = parse("/a/b/index.html").resolve("style.css")
        assert result.complete == "/a/b/style.css"

    def test_absolute_other_overrides_base(self):
        result = parse("a/b").resolve("/c/d")
        assert result.complete == "/c/d"

    def test_absolute_other_is_returned_as_is(self):
        other = parse("/c/d")
        assert parse("/a/b/").resolve(other) is other

    def test_device_other_overrides_base(self):
        base = parse("C:\\temp\\", "\\")
        result = base.resolve("D:\\data\\f.bin")
        assert result.device == "D:"
        assert result.complete == "D:\\data\\f.bin"

    def test_foreign_separator_overrides_base(self):
        base = parse("/a/b/")
        other = parse("x\\y", "\\")
        assert base.resolve(other) is other

    def test_text_is_parsed_with_base_separator(self):
        base = parse("C:\\temp\\", "\\")
        result = base.resolve("sub\\file.txt")
        assert result.device == "C:"
        assert result.folder == ("temp", "sub")
        assert result.file == "file.txt"
        assert result.separator == "\\"

    def test_base_fields_carried_over(self):
        base = parse("rel/dir/")
        result = base.resolve("x")
        assert result.is_absolute is False
        assert result.device == ""
        assert result.separator == "/"
        assert result.complete == "rel/dir/x"

    def test_result_is_not_normalized(self):
        base = parse("/a/").normalized
        result = base.resolve("../b")
        assert result.is_normalized is False
        assert result.folder == ("a", "..")

    def test_relative_other_directory(self):
        result = parse("/a/").resolve("b/c/")
        assert result.file == ""
        assert result.complete == "/a/b/c/"

    def test_parent_text_is_kept_unnormalized(self):
        result = parse("/a/b/").resolve("..")
        assert result.folder == ("a", "b", "..")
        assert result.complete == "/a/b/../"

    def test_empty_other(self):
        result = parse("/a/b.txt").resolve("")
        assert result.complete == "/a/"

    def test_free_function_matches_method(self):
        base = parse("/a/b/")
        assert resolve(base, "c") == base.resolve("c")


class TestResolveNormalized:
    def test_parent_reference(self):
        result = parse("/a/b/").resolve_normalized("../x")
        assert result.complete == "/a/x"
        assert result.is_normalized is True

    def test_resolve_then_normalize(self):
        assert parse("/a/b/").resolve(parse("../x")).normalized.complete == "/a/x"

    def test_free_function(self):
        result = resolve_normalized(parse("/srv/www/"), "./static/../img/logo.png")
        assert result.complete == "/srv/www/img/logo.png"

    def test_absolute_other_is_normalized(self):
        result = parse("/a/").resolve_normalized("/x/../y/z")
        assert result.complete == "/y/z"

    def test_parent_beyond_relative_base_is_dropped(self):
        result = parse("a/").resolve_normalized("../../b")
        assert result.complete == "b"

    def test_parent_directory_text(self):
        result = parse("/a/b/").resolve_normalized("..")
        assert result.complete == "/a/"

    def test_parent_then_current_directory_text(self):
        assert parse("/a/b/c/").resolve_normalized("../..").complete == "/a/"
        assert parse("/a/b/").resolve_normalized(".").complete == "/a/b/"
