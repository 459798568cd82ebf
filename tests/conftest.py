import json
import os
import sys
import zipfile
from pathlib import Path

import pytest

repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
tools_dir = os.path.join(repo_root, "tools")
if tools_dir not in sys.path:
    sys.path.insert(0, tools_dir)


def write_file(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_manifest(root: Path, payload) -> Path:
    return write_file(root, "pack.mcmeta", json.dumps(payload, indent=2))


@pytest.fixture
def sample_pack(tmp_path):
    """A pack with two namespaces, a worldgen folder and some noise files."""
    root = tmp_path / "sample"
    write_manifest(root, {
        "pack": {
            "pack_format": 61,
            "description": "Sample pack",
            "supported_formats": {"min_inclusive": 48, "max_inclusive": 61},
        },
        "features": {"enabled": ["minecraft:trade_rebalance", "example:unknown"]},
        "filter": {"block": [{"namespace": "minecraft", "path": "recipe/.*"}]},
        "overlays": {"entries": [{"formats": [57, 61], "directory": "overlay_new"}]},
    })
    write_file(root, "data/demo/function/main.mcfunction", "say hi\n")
    write_file(root, "data/demo/function/utils/tick.mcfunction", "say tick\n")
    write_file(root, "data/demo/recipe/stone.json", "{}")
    write_file(root, "data/demo/advancement/root.json", "{}")
    write_file(root, "data/demo/loot_table/chest.json", "{}")
    write_file(root, "data/demo/predicate/night.json", "{}")
    write_file(root, "data/demo/tags/block/ores.json", "{}")
    write_file(root, "data/demo/readme.txt", "notes")
    write_file(root, "data/minecraft/tags/function/load.json", '{"values": []}')
    write_file(root, "data/terrain/worldgen/biome/plains.json", "{}")
    (root / "data" / "empty").mkdir()
    write_file(root, "data/noise/notes.md", "nothing to count")
    return root


@pytest.fixture
def minimal_pack(tmp_path):
    root = tmp_path / "minimal"
    write_manifest(root, {"pack": {"pack_format": 48, "description": "Minimal"}})
    (root / "data").mkdir()
    return root


def zip_tree(source: Path, destination: Path, prefix: str = "") -> Path:
    """Zip a directory with an optional folder prefix on every entry."""
    with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for path in sorted(source.rglob("*")):
            if path.is_file():
                archive.write(path, prefix + path.relative_to(source).as_posix())
    return destination


def corrupt_archive_member(archive: Path, member: str) -> Path:
    """Overwrite the compressed bytes of one archive member with 0xFF."""
    with zipfile.ZipFile(archive) as handle:
        info = handle.getinfo(member)
    data = bytearray(archive.read_bytes())
    offset = info.header_offset
    name_length = int.from_bytes(data[offset + 26:offset + 28], "little")
    extra_length = int.from_bytes(data[offset + 28:offset + 30], "little")
    start = offset + 30 + name_length + extra_length
    data[start:start + info.compress_size] = b"\xff" * info.compress_size
    archive.write_bytes(bytes(data))
    return archive
