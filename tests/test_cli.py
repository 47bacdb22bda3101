import json
import logging

import pytest

from icon_search import cli
from synonyms import cli as synonyms_cli


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
    detail = logging.getLogger("detail")
    for handler in detail.handlers[:]:
        detail.removeHandler(handler)


@pytest.fixture
def config_path(tmp_path):
    names = ["SaveRegular", "SaveFilled", "DeleteRegular", "TrashRegular", "LockClosedRegular"]
    (tmp_path / "names.json").write_text(json.dumps(names), encoding="utf-8")
    (tmp_path / "sizes.json").write_text(json.dumps({"Save": ["20", "24"]}), encoding="utf-8")
    path = tmp_path / "config.ini"
    path.write_text(
        "[SEARCH]\n"
        "catalog_path = names.json\n"
        "sizes_path = sizes.json\n"
        "visual_tags_path = tags.json\n"
        "icon_package = @acme/icons\n"
        "[SYNONYMS]\n"
        "enabled = 0\n",
        encoding="utf-8",
    )
    return path


def test_search_json(config_path, capsys):
    code = cli.main(["--config", str(config_path), "search", "save", "--json", "--max-results", "2"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert [item["name"] for item in data] == ["SaveRegular", "SaveFilled"]
    assert data[0]["importStatement"] == 'import { SaveRegular } from "@acme/icons";'
    assert data[0]["availableSizes"] == ["20", "24"]


def test_search_text_explain(config_path, capsys):
    assert cli.main(["--config", str(config_path), "search", "delete", "--explain"]) == 0
    out = capsys.readouterr().out
    assert "DeleteRegular" in out
    assert "TrashRegular" in out
    assert 'Semantic: "delete" -> "Trash"' in out


def test_search_without_matches(config_path, capsys):
    assert cli.main(["--config", str(config_path), "search", "xqzvwk"]) == 0
    assert 'No icons found matching "xqzvwk".' in capsys.readouterr().out


def test_invalid_input_exits_with_2(config_path, capsys):
    assert cli.main(["--config", str(config_path), "search", "save", "--threshold", "2"]) == 2
    assert "threshold" in capsys.readouterr().err


def test_missing_catalog_exits_with_1(tmp_path, capsys):
    path = tmp_path / "config.ini"
    path.write_text("[SEARCH]\ncatalog_path = nowhere.json\n[SYNONYMS]\nenabled = 0\n", encoding="utf-8")
    assert cli.main(["--config", str(path), "search", "save"]) == 1
    assert "nowhere.json" in capsys.readouterr().err


def test_build_tags_then_search_uses_artifact(config_path, capsys):
    assert cli.main(["--config", str(config_path), "build-tags"]) == 0
    artifact = json.loads((config_path.parent / "tags.json").read_text(encoding="utf-8"))
    assert "LockClosed" in artifact["icons"]
    capsys.readouterr()

    assert cli.main(["--config", str(config_path), "search", "security", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "LockClosedRegular"


def test_tags_and_concepts(capsys):
    assert cli.main(["tags", "ArrowUpRegular"]) == 0
    assert "arrow" in capsys.readouterr().out
    assert cli.main(["concepts", "Delete"]) == 0
    assert "Trash" in capsys.readouterr().out
    assert cli.main(["concepts", "xqzvwk"]) == 1


def test_synonyms_cli(tmp_path, capsys):
    path = tmp_path / "thesaurus.json"
    path.write_text(json.dumps({"delete": {"synonyms": {"verb": ["erase", "remove"]}}}), encoding="utf-8")

    synonyms_cli.main(["validate", str(path)])
    assert "OK" in capsys.readouterr().out

    synonyms_cli.main(["stats", str(path)])
    out = capsys.readouterr().out
    assert "Entries: 1" in out
    assert "verb: 1" in out

    synonyms_cli.main(["lookup", str(path), "delete", "--no-wordnet"])
    assert "delete: erase, remove" in capsys.readouterr().out

    out_file = tmp_path / "export.txt"
    synonyms_cli.main(["export", str(path), "--output", str(out_file)])
    assert out_file.read_text(encoding="utf-8") == "delete: erase, remove"
