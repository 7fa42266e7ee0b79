"""Tests for TODO/FIXME/NOTE/HACK/XXX extraction."""

from code_scout.scanning.annotations import MARKERS, AnnotationExtractor, extract_annotations
from code_scout.scanning.languages import LanguageFamily


def scan(content, path="a.js"):
    return AnnotationExtractor().scan_content(path, content, LanguageFamily.BRACE)


class TestMarkers:
    """Marker and message extraction."""

    def test_line_comment(self):
        items = scan("// TODO: fix this")
        assert len(items) == 1
        assert items[0].todo_type == "TODO"
        assert items[0].message == "fix this"
        assert items[0].line_number == 1

    def test_colon_is_optional(self):
        items = scan("# FIXME handle None")
        assert [(i.todo_type, i.message) for i in items] == [("FIXME", "handle None")]

    def test_block_comment_keeps_closer(self):
        items = scan("/* HACK: temporary */")
        assert items[0].todo_type == "HACK"
        assert items[0].message == "temporary */"

    def test_trailing_comment(self):
        items = scan("    x = 1  # NOTE: check later  ")
        assert items[0].todo_type == "NOTE"
        assert items[0].message == "check later"
        assert items[0].context == "x = 1  # NOTE: check later"

    def test_all_markers(self):
        content = "\n".join(f"// {marker}: item" for marker in MARKERS)
        assert [i.todo_type for i in scan(content)] == list(MARKERS)

    def test_lowercase_ignored(self):
        assert scan("// todo: later") == []

    def test_marker_without_comment_opener(self):
        assert scan('const label = "TODO: not a comment";') == []

    def test_line_numbers(self):
        content = "a();\n\n// XXX: one\nb();\n# TODO two\n"
        assert [(i.line_number, i.message) for i in scan(content)] == [(3, "one"), (5, "two")]


class TestScanFiles:
    """Every file type is scanned."""

    def test_markdown_file(self, write_file):
        path = write_file("notes.md", "Intro\n<!-- ignored -->\n# TODO: write docs\n")
        items = extract_annotations(path)
        assert [(i.todo_type, i.line_number) for i in items] == [("TODO", 3)]
        assert items[0].file == str(path)

    def test_fixture_files(self, fixtures_dir):
        ts = extract_annotations(fixtures_dir / "sample_app.ts")
        assert [(i.todo_type, i.message, i.line_number) for i in ts] == [
            ("TODO", "memoize this", 5),
            ("FIXME", "handle errors */", 13),
        ]

        py = extract_annotations(fixtures_dir / "sample_service.py")
        assert [(i.todo_type, i.line_number) for i in py] == [("NOTE", 6), ("HACK", 17)]

        rs = extract_annotations(fixtures_dir / "sample_lib.rs")
        assert [(i.todo_type, i.message) for i in rs] == [("XXX", "remove debug output")]

        go = extract_annotations(fixtures_dir / "sample_main.go")
        assert [(i.todo_type, i.line_number) for i in go] == [("TODO", 6)]
