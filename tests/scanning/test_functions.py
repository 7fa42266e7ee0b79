"""Tests for function boundary extraction."""

import pytest

from code_scout.exceptions import FileAccessError
from code_scout.scanning.functions import (
    MAX_SCAN_LINES,
    FunctionExtractor,
    brace_delta,
    extract_functions,
    indent_width,
)
from code_scout.scanning.languages import LanguageFamily


@pytest.fixture
def extractor():
    return FunctionExtractor()


def spans(records):
    return [(r.name, r.line_start, r.line_end) for r in records]


class TestHelpers:
    def test_indent_width(self):
        assert indent_width("    x = 1") == 4
        assert indent_width("\tx") == 1
        assert indent_width("x") == 0

    def test_brace_delta(self):
        assert brace_delta("if (a) {") == 1
        assert brace_delta("} else {") == 0
        assert brace_delta("};") == -1


class TestBraceBlocks:
    """Brace counting for JavaScript/TypeScript and Rust."""

    def test_simple_function(self, extractor):
        content = "function foo() {\n  return 1;\n}\n"
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert spans(records) == [("foo", 1, 3)]
        assert records[0].signature == "function foo() {"

    def test_arrow_function(self, extractor):
        content = "const add = (a, b) => {\n  return a + b;\n};\n"
        records = extractor.scan_content("a.ts", content, LanguageFamily.BRACE)
        assert spans(records) == [("add", 1, 3)]

    def test_async_arrow_function(self, extractor):
        content = "const load = async () => {\n  await fetchAll();\n};\n"
        records = extractor.scan_content("a.ts", content, LanguageFamily.BRACE)
        assert spans(records) == [("load", 1, 3)]

    def test_nested_braces(self, extractor):
        content = "\n".join(
            [
                "function outer() {",
                "  if (a) {",
                "    while (b) {",
                "    }",
                "  }",
                "}",
            ]
        )
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert spans(records) == [("outer", 1, 6)]

    def test_one_line_function(self, extractor):
        content = "function identity(x) { return x; }\nconst y = 1;\n"
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert spans(records) == [("identity", 1, 1)]

    def test_brace_on_next_line(self, extractor):
        content = "fn main()\n{\n    run();\n}\n"
        records = extractor.scan_content("main.rs", content, LanguageFamily.RUST)
        assert spans(records) == [("main", 1, 4)]

    def test_bodiless_declaration(self, extractor):
        content = "trait Shape {\n    fn area(&self) -> f64;\n}\n"
        records = extractor.scan_content("lib.rs", content, LanguageFamily.RUST)
        assert spans(records) == [("area", 2, 2)]

    def test_unterminated_block_runs_to_last_line(self, extractor):
        content = "function broken() {\n  doWork();\n"
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert spans(records) == [("broken", 1, 2)]

    def test_scan_cap(self):
        """An unbalanced body stops just past the cap."""
        content = "function f() {\n" + "  {\n" * 20
        records = FunctionExtractor(max_scan_lines=5).scan_content(
            "a.js", content, LanguageFamily.BRACE
        )
        assert spans(records) == [("f", 1, 7)]

    def test_default_scan_cap(self, extractor):
        content = "function f() {\n" + "  {\n" * 1500
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert records[0].line_end == MAX_SCAN_LINES + 2

    def test_invalid_cap(self):
        with pytest.raises(ValueError):
            FunctionExtractor(max_scan_lines=0)

    def test_content_matches_span(self, extractor):
        content = "// header\nfunction a() {\n  x();\n}\n\nconst b = () => {\n  y();\n};\n"
        lines = content.split("\n")
        records = extractor.scan_content("a.js", content, LanguageFamily.BRACE)
        assert len(records) == 2
        for record in records:
            assert record.content == "\n".join(lines[record.line_start - 1 : record.line_end])
            assert record.line_count == record.line_end - record.line_start + 1


class TestIndentBlocks:
    """Indentation tracking for Python."""

    def test_blank_lines_stay_inside(self, extractor):
        content = "def foo():\n    x = 1\n\n    return x\n\ndef bar():\n    pass\n"
        records = extractor.scan_content("m.py", content, LanguageFamily.PYTHON)
        assert spans(records) == [("foo", 1, 5), ("bar", 6, 7)]

    def test_methods(self, extractor):
        content = (
            "class A:\n"
            "    def m(self):\n"
            "        return 1\n"
            "    def n(self):\n"
            "        return 2\n"
        )
        records = extractor.scan_content("m.py", content, LanguageFamily.PYTHON)
        assert spans(records) == [("m", 2, 3), ("n", 4, 5)]
        assert records[0].signature == "def m(self):"

    def test_function_at_end_of_file(self, extractor):
        records = extractor.scan_content("m.py", "def last():\n    pass", LanguageFamily.PYTHON)
        assert spans(records) == [("last", 1, 2)]


class TestScanFiles:
    """Reading files from disk."""

    def test_go_has_no_functions(self, write_file):
        path = write_file("main.go", "package main\n\nfunc main() {\n}\n")
        assert extract_functions(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError):
            extract_functions(tmp_path / "missing.js")

    def test_zero_cap_rejected(self, write_file):
        path = write_file("a.js", "function f() {\n}\n")
        with pytest.raises(ValueError):
            extract_functions(path, max_scan_lines=0)

    def test_cap_argument(self, write_file):
        path = write_file("a.js", "function f() {\n" + "  {\n" * 10)
        assert extract_functions(path, max_scan_lines=2)[0].line_end == 4

    def test_fixture_files(self, fixtures_dir):
        ts = extract_functions(fixtures_dir / "sample_app.ts")
        assert spans(ts) == [("renderHeader", 6, 11), ("fetchUser", 14, 17), ("identity", 19, 19)]

        py = extract_functions(fixtures_dir / "sample_service.py")
        assert spans(py) == [("load_user", 9, 14), ("get", 16, 19), ("delete", 20, 21)]

        rs = extract_functions(fixtures_dir / "sample_lib.rs")
        assert spans(rs) == [("area", 5, 5), ("build_index", 8, 14), ("main", 16, 20)]
