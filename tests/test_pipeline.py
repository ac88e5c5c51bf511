"""Integration tests for reading, locating and writing a single file."""

import json
from pathlib import Path

import pytest

from scriptspan.config import Config
from scriptspan.locator.base import MalformedMarkupError
from scriptspan.parser import Parser
from scriptspan.pipeline import process_file

FIXTURES = Path(__file__).parent / "fixtures"


def test_pipeline_html(tmp_path: Path):
    output_dir = tmp_path / "output"
    config = Config(output_dir=output_dir, dry_run=False)

    result = process_file(FIXTURES / "page.html", config, Parser())

    assert result is not None
    assert result.script_count == 4
    assert [b.self_closing for b in result.scripts] == [True, True, False, False]

    assert (output_dir / "page.script-002.js").read_text(encoding="utf-8") == '"hello third!"'
    assert (output_dir / "page.script-003.js").read_text(encoding="utf-8") == '"hello fourth!"'
    assert not (output_dir / "page.script-000.js").exists()

    report = json.loads((output_dir / "page.scripts.json").read_text(encoding="utf-8"))
    assert report["script_count"] == 4
    assert report["scripts"][0]["attributes"]["src"] == "chrome://first.js"


def test_pipeline_lookup_in_fixture(tmp_path: Path):
    text = (FIXTURES / "page.html").read_text(encoding="utf-8")
    config = Config(output_dir=tmp_path, dry_run=True)

    result = process_file(FIXTURES / "page.html", config, Parser())

    assert result is not None
    assert result.get_script_info(text.index("hello third!")).index == 2
    assert result.get_script_info(text.index("hello fourth!")).index == 3


def test_pipeline_dry_run_writes_nothing(tmp_path: Path):
    output_dir = tmp_path / "output"
    config = Config(output_dir=output_dir, dry_run=True)

    result = process_file(FIXTURES / "page.html", config, Parser())

    assert result is not None
    assert result.script_count == 4
    assert not output_dir.exists()


def test_pipeline_no_scripts_writes_nothing(tmp_path: Path):
    output_dir = tmp_path / "output"
    config = Config(output_dir=output_dir)

    result = process_file(FIXTURES / "empty.html", config, Parser())

    assert result is not None
    assert result.script_count == 0
    assert not output_dir.exists()


def test_pipeline_report_only(tmp_path: Path):
    config = Config(output_dir=tmp_path, extract_scripts=False)

    process_file(FIXTURES / "page.html", config, Parser())

    assert (tmp_path / "page.scripts.json").exists()
    assert not list(tmp_path.glob("*.js"))


def test_pipeline_scripts_only(tmp_path: Path):
    config = Config(output_dir=tmp_path, write_report=False)

    process_file(FIXTURES / "page.html", config, Parser())

    assert not (tmp_path / "page.scripts.json").exists()
    assert len(list(tmp_path.glob("*.js"))) == 2


def test_pipeline_bare_script(tmp_path: Path):
    js = tmp_path / "app.js"
    js.write_text("var a = 1;\n", encoding="utf-8")
    output_dir = tmp_path / "output"

    result = process_file(js, Config(output_dir=output_dir), Parser())

    assert result is not None
    assert result.script_count == 1
    assert (output_dir / "app.script-000.js").read_text(encoding="utf-8") == "var a = 1;\n"


def test_pipeline_uses_parser_cache(tmp_path: Path):
    parser = Parser()
    config = Config(output_dir=tmp_path, dry_run=True)

    first = process_file(FIXTURES / "page.html", config, parser)
    second = process_file(FIXTURES / "page.html", config, parser)

    assert first is second
    assert parser.is_cached(str(FIXTURES / "page.html"))


def test_pipeline_unsupported_file(tmp_path: Path):
    xyz = tmp_path / "data.xyz"
    xyz.write_text("<script>x</script>", encoding="utf-8")

    assert process_file(xyz, Config(output_dir=tmp_path), Parser()) is None


def test_pipeline_malformed_markup_propagates(tmp_path: Path):
    bad = tmp_path / "bad.html"
    bad.write_text('<p><script type="x"', encoding="utf-8")

    with pytest.raises(MalformedMarkupError):
        process_file(bad, Config(output_dir=tmp_path), Parser())
