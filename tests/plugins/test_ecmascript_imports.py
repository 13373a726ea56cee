"""Tests for the JavaScript/TypeScript import extractor."""

from __future__ import annotations

from pathlib import Path

import pytest

from gointernal.domain.sites import ImportKind, ImportSite
from gointernal.plugins.builtins.ecmascript_imports import (
    EcmascriptImportsPlugin,
    blank_comments,
    extract_ecmascript_sites,
    scan_source,
)


def _specs(source: str) -> list[str]:
    return [site.specifier for site in extract_ecmascript_sites(source)]


class TestImportForms:
    @pytest.mark.parametrize(
        "source",
        [
            "import x from './a';",
            "import { x, y } from './a';",
            "import * as ns from './a';",
            "import './a';",
            'import x from "./a";',
            "import type { T } from './a';",
            "import def, { named } from './a'",
        ],
    )
    def test_static_import(self, source: str) -> None:
        sites = extract_ecmascript_sites(source)
        assert [(s.specifier, s.kind) for s in sites] == [("./a", ImportKind.IMPORT)]

    def test_multiline_import(self) -> None:
        source = "import {\n  a,\n  b,\n} from '../internal/x';\n"
        sites = extract_ecmascript_sites(source)
        assert sites == [ImportSite("../internal/x", 4, 7, ImportKind.IMPORT)]

    @pytest.mark.parametrize(
        "source",
        [
            "export { x } from './a';",
            "export * from './a';",
            "export * as ns from './a';",
            "export type { T } from './a';",
        ],
    )
    def test_reexport(self, source: str) -> None:
        sites = extract_ecmascript_sites(source)
        assert [(s.specifier, s.kind) for s in sites] == [("./a", ImportKind.EXPORT)]

    def test_local_export_is_ignored(self) -> None:
        assert _specs("export const a = 1;\nexport { a };\n") == []

    def test_require(self) -> None:
        sites = extract_ecmascript_sites("const h = require('./internal/utils');")
        assert sites == [ImportSite("./internal/utils", 1, 18, ImportKind.REQUIRE)]

    def test_require_with_extra_arguments_is_ignored(self) -> None:
        assert _specs("require('./a', opts);") == []

    def test_require_with_expression_is_ignored(self) -> None:
        assert _specs("require(base + '/internal/x');") == []

    def test_member_require_is_ignored(self) -> None:
        assert _specs("loader.require('./a');") == []

    def test_dynamic_import(self) -> None:
        sites = extract_ecmascript_sites("const m = await import('./internal/lazy');")
        assert sites == [ImportSite("./internal/lazy", 1, 23, ImportKind.DYNAMIC_IMPORT)]

    def test_identifier_containing_import_is_ignored(self) -> None:
        assert _specs("reimport('./a'); myrequire('./b');") == []


class TestPositions:
    def test_line_and_column_point_at_quote(self) -> None:
        source = "// header\nimport x from './a';\n"
        assert extract_ecmascript_sites(source) == [ImportSite("./a", 2, 14, ImportKind.IMPORT)]

    def test_sorted_by_position(self) -> None:
        source = "const a = require('./a');\nimport b from './b';\nexport * from './c';\n"
        assert _specs(source) == ["./a", "./b", "./c"]


class TestComments:
    def test_line_comment_is_ignored(self) -> None:
        assert _specs("// import x from './a';\n") == []

    def test_block_comment_is_ignored(self) -> None:
        assert _specs("/*\nimport x from './a';\n*/\nimport y from './b';") == ["./b"]

    def test_comment_markers_inside_strings_are_kept(self) -> None:
        source = "const url = 'http://example.com';\nimport x from './a';\n"
        assert _specs(source) == ["./a"]

    def test_blank_comments_keeps_layout(self) -> None:
        source = "a /* x\ny */ b // z\nc"
        blanked = blank_comments(source)
        assert len(blanked) == len(source)
        assert blanked.count("\n") == source.count("\n")
        assert "x" not in blanked and "z" not in blanked

    def test_unterminated_block_comment(self) -> None:
        assert _specs("import a from './a';\n/* import b from './b';") == ["./a"]


class TestStringLiterals:
    def test_import_text_in_string_is_ignored(self) -> None:
        source = "const help = \"usage: import '../other/internal/x' is forbidden\";\n"
        assert _specs(source) == []

    def test_require_text_in_template_is_ignored(self) -> None:
        source = "const msg = `call require('../other/internal/y') to load`;\n"
        assert _specs(source) == []

    def test_multiline_template_is_ignored(self) -> None:
        source = "const doc = `\nimport x from './internal/a';\n`;\nimport y from './b';\n"
        assert _specs(source) == ["./b"]

    def test_real_import_after_string_is_kept(self) -> None:
        source = "const s = \"import './nope'\"; import x from './yes';"
        assert _specs(source) == ["./yes"]

    def test_scan_records_literal_spans(self) -> None:
        text, spans = scan_source("a = 'x' // 'c'\nb = `t`")
        assert spans == [(4, 7), (19, 22)]
        assert "c" not in text


class TestPlugin:
    @pytest.mark.parametrize("suffix", [".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx"])
    def test_handles_ecmascript_files(self, suffix: str) -> None:
        plugin = EcmascriptImportsPlugin()
        sites = plugin.extract_import_sites(path=Path(f"a{suffix}"), source="import './x';")
        assert sites is not None
        assert sites[0].specifier == "./x"

    def test_declines_other_files(self) -> None:
        plugin = EcmascriptImportsPlugin()
        assert plugin.extract_import_sites(path=Path("a.py"), source="import x") is None
