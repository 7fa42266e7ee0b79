"""Tests for relative import resolution."""

from code_scout.scanning.resolver import RESOLVE_EXTENSIONS, ImportResolver, resolve_imports


class TestResolveImports:
    """Mapping specifiers to files on disk."""

    def test_mixed_project(self, tmp_path, write_file):
        app = write_file(
            "src/app.js",
            'import React from "react";\n'
            'import { format } from "./utils";\n'
            'import Button from "./components";\n'
            'import styles from "./app.css";\n'
            'const cfg = require("../config.json");\n'
            'import gone from "./missing";\n',
        )
        write_file("src/utils.ts")
        write_file("src/components/index.jsx")
        write_file("src/app.css")
        write_file("config.json", "{}")

        assert resolve_imports(app) == [
            str(tmp_path / "config.json"),
            str(tmp_path / "src" / "app.css"),
            str(tmp_path / "src" / "components" / "index.jsx"),
            str(tmp_path / "src" / "utils.ts"),
        ]

    def test_extension_order(self, tmp_path, write_file):
        app = write_file("main.js", 'import lib from "./lib";\n')
        write_file("lib.ts")
        write_file("lib.js")
        assert resolve_imports(app) == [str(tmp_path / "lib.js")]

    def test_exact_match_first(self, tmp_path, write_file):
        app = write_file("main.js", 'const data = require("./data.json");\n')
        write_file("data.json", "[]")
        write_file("data.json.js")
        assert resolve_imports(app) == [str(tmp_path / "data.json")]

    def test_sibling_file_before_index(self, tmp_path, write_file):
        app = write_file("main.js", 'import lib from "./lib";\n')
        write_file("lib.ts")
        write_file("lib/index.js")
        assert resolve_imports(app) == [str(tmp_path / "lib.ts")]

    def test_duplicates_collapsed(self, tmp_path, write_file):
        app = write_file(
            "main.js",
            'import a from "./shared";\nconst b = require("./shared");\n',
        )
        write_file("shared.js")
        assert resolve_imports(app) == [str(tmp_path / "shared.js")]

    def test_package_imports_skipped(self, write_file):
        app = write_file("main.js", 'import x from "lodash";\nconst fs = require("fs");\n')
        assert resolve_imports(app) == []

    def test_parent_segments_normalized(self, tmp_path, write_file):
        app = write_file("a/b/main.js", 'import x from "../../top";\n')
        write_file("top.js")
        assert resolve_imports(app) == [str(tmp_path / "top.js")]

    def test_absolute_specifier(self, tmp_path, write_file):
        target = write_file("abs/target.ts")
        app = write_file("main.js", f'import t from "{tmp_path / "abs" / "target"}";\n')
        assert resolve_imports(app) == [str(target)]

    def test_dot_specifier_stays_in_directory(self, tmp_path, write_file):
        """"." names the importing directory, never a sibling file of it."""
        app = write_file("src/a.js", 'const here = require(".");\n')
        write_file("src.js")
        assert resolve_imports(app) == []

        write_file("src/index.ts")
        assert resolve_imports(app) == [str(tmp_path / "src" / "index.ts")]

    def test_trailing_slash_tries_index_only(self, tmp_path, write_file):
        app = write_file("main.js", 'import lib from "./lib/";\n')
        write_file("lib.js")
        write_file("lib/index.js")
        assert resolve_imports(app) == [str(tmp_path / "lib" / "index.js")]

    def test_parent_specifier(self, tmp_path, write_file):
        app = write_file("pkg/sub/a.js", 'import up from "..";\n')
        write_file("pkg/sub/...js")
        write_file("pkg/index.js")
        assert resolve_imports(app) == [str(tmp_path / "pkg" / "index.js")]

    def test_unsupported_file(self, write_file):
        assert resolve_imports(write_file("notes.txt", 'import x from "./y";\n')) == []


class TestResolverOptions:
    def test_default_extensions(self):
        assert RESOLVE_EXTENSIONS == ("js", "jsx", "ts", "tsx", "css", "scss", "json", "py", "rs")

    def test_custom_extensions(self, tmp_path, write_file):
        app = write_file("main.js", 'import Comp from "./Comp";\n')
        write_file("Comp.vue")
        write_file("Comp.js")
        resolver = ImportResolver(extensions=["vue"])
        assert resolver.resolve(app) == [str(tmp_path / "Comp.vue")]

    def test_resolve_specifier_miss(self, tmp_path):
        assert ImportResolver().resolve_specifier(tmp_path, "./nothing") is None
