"""Tests for the dynamic asset rewriter."""

from __future__ import annotations

from pathlib import Path

from addons_pull.rewrite.assets import (
    build_asset_header,
    find_assets,
    include_imports,
    needs_asset_rewrite,
    rewrite_references,
)


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_include_imports_routes_single_icon_through_lookup(tmp_path: Path) -> None:
    _write(tmp_path / "icon.svg", "<svg/>")
    script = 'el.src = addon.self.dir + "/icon.svg";\n'
    _write(tmp_path / "userscript.js", script)

    result = include_imports(tmp_path, script)

    assert result == (
        "/* inserted by addons_pull */\n"
        'import _twAsset0 from "./icon.svg";\n'
        "const _twGetAsset = (path) => {\n"
        '  if (path === "/icon.svg") return _twAsset0;\n'
        "  throw new Error(`Unknown asset: ${path}`);\n"
        "};\n"
        "\n"
        'el.src = _twGetAsset("/icon.svg");\n'
    )


def test_find_assets_keeps_only_images_in_walk_order(tmp_path: Path) -> None:
    _write(tmp_path / "userscript.js")
    _write(tmp_path / "style.css")
    _write(tmp_path / "icons" / "b.svg")
    _write(tmp_path / "icons" / "a.png")
    _write(tmp_path / "cursor.png")

    assert find_assets(tmp_path) == ["cursor.png", "icons/a.png", "icons/b.svg"]


def test_header_declares_every_asset_in_lookup() -> None:
    assets = ["cursor.png", "icons/a.png", "icons/b.svg"]

    header = build_asset_header(assets)

    for index, asset in enumerate(assets):
        assert f'import _twAsset{index} from "./{asset}";\n' in header
        assert f'  if (path === "/{asset}") return _twAsset{index};\n' in header
    assert header.index("const _twGetAsset") > header.index("import _twAsset2")
    assert header.endswith("  throw new Error(`Unknown asset: ${path}`);\n};\n\n")


def test_header_without_assets_still_defines_throwing_lookup() -> None:
    header = build_asset_header([])

    assert header == (
        "/* inserted by addons_pull */\n"
        "const _twGetAsset = (path) => {\n"
        "  throw new Error(`Unknown asset: ${path}`);\n"
        "};\n"
        "\n"
    )


def test_header_keeps_non_ascii_paths_verbatim() -> None:
    header = build_asset_header(["flèche.svg"])

    assert 'import _twAsset0 from "./flèche.svg";' in header


def test_rewrite_handles_template_literal_interpolation() -> None:
    source = "img.src = `${addon.self.dir + \"/icons/\" + name + \".svg\"}`;\n"

    assert rewrite_references(source) == (
        "img.src = `${_twGetAsset(\"/icons/\" + name + \".svg\")}`;\n"
    )


def test_rewrite_handles_lib_references_and_stops_at_commas() -> None:
    source = 'load(addon.self.lib + "/thirdparty/cs/chart.svg", options);\n'

    assert rewrite_references(source) == (
        'load(_twGetAsset("/thirdparty/cs/chart.svg"), options);\n'
    )


def test_rewrite_tolerates_missing_spaces_around_plus() -> None:
    source = 'a = addon.self.dir+"/x.png";\nb = addon.self.dir   +   "/y.png";\n'

    assert rewrite_references(source) == (
        'a = _twGetAsset("/x.png");\nb = _twGetAsset("/y.png");\n'
    )


def test_rewrite_leaves_unrelated_code_untouched() -> None:
    source = "const dir = addon.self.id;\nconsole.log(dir);\n"

    assert rewrite_references(source) == source


def test_needs_asset_rewrite_detects_markers() -> None:
    assert needs_asset_rewrite("x = addon.self.dir;")
    assert needs_asset_rewrite("x = addon.self.lib;")
    assert not needs_asset_rewrite("x = addon.tab.traps;")
