import json

import pytest

from mcpack.builder import PackSettings, build_pack, encode_supported_formats
from mcpack.errors import (
    InvalidElementTypeError,
    InvalidFormatError,
    InvalidIconError,
    InvalidNamespaceError,
    Outcome,
)
from mcpack.models import FormatRange
from mcpack.prompts import CannedPrompter, NonInteractivePrompter


def _settings(tmp_path, **overrides):
    values = dict(
        directory=tmp_path / "test-pack",
        name="test-pack",
        description="A test pack",
        pack_formats=[48],
    )
    values.update(overrides)
    return PackSettings(**values)


def _manifest(root):
    return json.loads((root / "pack.mcmeta").read_text(encoding="utf-8"))


def test_encode_full_run_as_range():
    assert encode_supported_formats([48, 57, 61]) == FormatRange(48, 61)


def test_encode_partial_run_as_array():
    assert encode_supported_formats([61, 48]) == [48, 61]


def test_encode_two_adjacent_formats_as_array():
    assert encode_supported_formats([48, 57]) == [48, 57]


def test_encode_single_format_omitted():
    assert encode_supported_formats([57]) is None
    assert encode_supported_formats([57, 57]) is None


def test_minimal_pack_tree(tmp_path):
    outcome = build_pack(_settings(tmp_path), force=False, prompter=NonInteractivePrompter())

    root = tmp_path / "test-pack"
    assert outcome is Outcome.CREATED
    assert sorted(p.name for p in root.iterdir()) == ["data", "pack.mcmeta"]
    assert list((root / "data").iterdir()) == []
    assert _manifest(root) == {"pack": {"description": "A test pack", "pack_format": 48}}


def test_manifest_uses_range_for_all_formats(tmp_path):
    build_pack(
        _settings(tmp_path, pack_formats=[57, 48, 61]),
        force=False,
        prompter=NonInteractivePrompter(),
    )
    pack = _manifest(tmp_path / "test-pack")["pack"]
    assert pack["pack_format"] == 61
    assert pack["supported_formats"] == {"min_inclusive": 48, "max_inclusive": 61}


def test_manifest_uses_array_for_gaps(tmp_path):
    build_pack(
        _settings(tmp_path, pack_formats=[48, 61]),
        force=False,
        prompter=NonInteractivePrompter(),
    )
    pack = _manifest(tmp_path / "test-pack")["pack"]
    assert pack["pack_format"] == 61
    assert pack["supported_formats"] == [48, 61]


def test_manifest_is_pretty_printed(tmp_path):
    build_pack(_settings(tmp_path), force=False, prompter=NonInteractivePrompter())
    text = (tmp_path / "test-pack" / "pack.mcmeta").read_text(encoding="utf-8")
    assert text.startswith('{\n  "pack": {\n    "description"')


def test_namespaces_and_starter_files(tmp_path):
    settings = _settings(
        tmp_path,
        include_minecraft_namespace=True,
        minecraft_tags=["load", "tick"],
        custom_namespace="  demo ",
        namespace_folders=["function", "tag", "recipe"],
    )
    build_pack(settings, force=False, prompter=NonInteractivePrompter())

    data = tmp_path / "test-pack" / "data"
    for tag in ("load", "tick"):
        tag_file = data / "minecraft" / "tags" / "function" / f"{tag}.json"
        assert json.loads(tag_file.read_text(encoding="utf-8")) == {"values": []}

    assert (data / "demo" / "function" / "main.mcfunction").read_text(encoding="utf-8") == ""
    assert json.loads((data / "demo" / "recipe" / "recipe.json").read_text(encoding="utf-8")) == {
        "type": ""
    }
    assert (data / "demo" / "tags").is_dir()
    assert list((data / "demo" / "tags").iterdir()) == []


def test_minecraft_namespace_without_tags(tmp_path):
    build_pack(
        _settings(tmp_path, include_minecraft_namespace=True),
        force=False,
        prompter=NonInteractivePrompter(),
    )
    tags_dir = tmp_path / "test-pack" / "data" / "minecraft" / "tags" / "function"
    assert tags_dir.is_dir()
    assert list(tags_dir.iterdir()) == []


def test_icon_is_copied(tmp_path):
    icon = tmp_path / "logo.PNG"
    icon.write_bytes(b"\x89PNG fake")
    build_pack(_settings(tmp_path, icon_path=icon), force=False, prompter=NonInteractivePrompter())
    assert (tmp_path / "test-pack" / "pack.png").read_bytes() == b"\x89PNG fake"


def test_force_keeps_icon_from_inside_target(tmp_path):
    root = tmp_path / "test-pack"
    root.mkdir()
    (root / "pack.mcmeta").write_text("{}", encoding="utf-8")
    (root / "pack.png").write_bytes(b"\x89PNG own icon")

    outcome = build_pack(
        _settings(tmp_path, icon_path=root / "pack.png"),
        force=True,
        prompter=CannedPrompter(),
    )

    assert outcome is Outcome.OVERWRITTEN
    assert (root / "pack.png").read_bytes() == b"\x89PNG own icon"
    assert _manifest(root)["pack"]["pack_format"] == 48


@pytest.mark.parametrize("icon_name, create", [("logo.jpg", True), ("missing.png", False)])
def test_bad_icon_rejected_before_any_write(tmp_path, icon_name, create):
    icon = tmp_path / icon_name
    if create:
        icon.write_bytes(b"jpeg")
    with pytest.raises(InvalidIconError):
        build_pack(
            _settings(tmp_path, icon_path=icon),
            force=False,
            prompter=NonInteractivePrompter(),
        )
    assert not (tmp_path / "test-pack").exists()


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"pack_formats": []}, InvalidFormatError),
        ({"pack_formats": [48, 99]}, InvalidFormatError),
        ({"custom_namespace": "   "}, InvalidNamespaceError),
        ({"custom_namespace": "demo", "namespace_folders": ["tags"]}, InvalidElementTypeError),
    ],
)
def test_invalid_settings_write_nothing(tmp_path, overrides, error):
    with pytest.raises(error):
        build_pack(_settings(tmp_path, **overrides), force=False, prompter=NonInteractivePrompter())
    assert not (tmp_path / "test-pack").exists()


def test_existing_directory_declined(tmp_path):
    root = tmp_path / "test-pack"
    root.mkdir()
    (root / "keep.txt").write_text("mine", encoding="utf-8")
    prompter = CannedPrompter([False])

    outcome = build_pack(_settings(tmp_path), force=False, prompter=prompter)

    assert outcome is Outcome.SKIPPED
    assert (root / "keep.txt").read_text(encoding="utf-8") == "mine"
    assert not (root / "pack.mcmeta").exists()
    assert prompter.messages == ["Folder test-pack already exists. Overwrite?"]


def test_existing_directory_confirmed(tmp_path):
    root = tmp_path / "test-pack"
    root.mkdir()
    (root / "old.txt").write_text("old", encoding="utf-8")

    outcome = build_pack(_settings(tmp_path), force=False, prompter=CannedPrompter([True]))

    assert outcome is Outcome.OVERWRITTEN
    assert not (root / "old.txt").exists()
    assert (root / "pack.mcmeta").is_file()


def test_force_replaces_without_asking(tmp_path):
    (tmp_path / "test-pack").mkdir()
    prompter = CannedPrompter()
    outcome = build_pack(_settings(tmp_path), force=True, prompter=prompter)
    assert outcome is Outcome.OVERWRITTEN
    assert prompter.messages == []
