"""Element catalog: the content types a datapack namespace can hold.

Each element type maps to a file extension, the folder it lives in under
``data/<namespace>/`` and a default template written by ``create`` and
``add``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final


@dataclass(frozen=True, slots=True)
class ElementType:
    """One entry of the element catalog.

    Invariants:
        - name is unique across the catalog
        - extension includes the leading dot
        - folder is the first path segment below the namespace
    """
    name: str
    extension: str
    template: Any = None
    folder: str = ""
    label: str = ""

    @property
    def directory(self) -> str:
        return self.folder or self.name

    @property
    def display_label(self) -> str:
        return self.label or self.name.replace("_", " ").title() + "s"

    @property
    def default_content(self) -> str:
        """Template rendered as pretty JSON ("" for templates without a body)."""
        if self.template is None:
            return ""
        return render_json(self.template)


def render_json(payload: Any) -> str:
    """Serialize a template the way pack files are written (2-space indent)."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


ELEMENT_TYPES: Final[tuple[ElementType, ...]] = (
    ElementType("function", ".mcfunction"),
    ElementType("tag", ".json", {"values": ["minecraft:stone"]}, folder="tags"),
    ElementType("advancement", ".json", {"criteria": {}}),
    ElementType("banner_pattern", ".json", {"asset_id": "", "translation_key": ""}),
    ElementType("chat_type", ".json", {
        "chat": {"translation_key": "", "parameters": []},
        "narration": {"translation_key": "", "parameters": []},
    }),
    ElementType("damage_type", ".json", {
        "message_id": "",
        "exhaustion": 0,
        "scaling": "never",
    }),
    ElementType("enchantment", ".json", {
        "description": "",
        "supported_items": "",
        "weight": 1,
        "max_level": 1,
        "min_cost": {"base": 0, "per_level_above_first": 0},
        "max_cost": {"base": 0, "per_level_above_first": 0},
        "anvil_cost": 0,
        "slots": [],
    }),
    ElementType("enchantment_provider", ".json", {
        "type": "minecraft:single",
        "enchantment": "",
    }),
    ElementType("instrument", ".json", {
        "sound_event": "",
        "range": 1,
        "use_duration": 1,
        "description": "",
    }),
    ElementType("item_modifier", ".json", {"function": ""}),
    ElementType("jukebox_song", ".json", {
        "description": "",
        "comparator_output": 0,
        "length_in_seconds": 1,
        "sound_event": "",
    }),
    ElementType("loot_table", ".json", {"type": ""}),
    ElementType("painting_variant", ".json", {
        "asset_id": "",
        "width": 1,
        "height": 1,
        "title": "",
        "author": "",
    }),
    ElementType("predicate", ".json", {"condition": ""}),
    ElementType("recipe", ".json", {"type": ""}),
    ElementType("trim_material", ".json", {
        "asset_name": "",
        "description": "",
        "ingredient": "",
        "item_model_index": 0,
    }),
    ElementType("trim_pattern", ".json", {
        "asset_id": "",
        "description": "",
        "template_item": "",
    }),
    ElementType("wolf_variant", ".json", {
        "biomes": "",
        "wild_texture": "",
        "tame_texture": "",
        "angry_texture": "",
    }),
)
"""All element types in display order."""

_BY_NAME: Final[dict[str, ElementType]] = {element.name: element for element in ELEMENT_TYPES}
_BY_FOLDER: Final[dict[str, ElementType]] = {element.directory: element for element in ELEMENT_TYPES}


def element_names() -> list[str]:
    """All catalog names in display order."""
    return [element.name for element in ELEMENT_TYPES]


def get_element(name: str) -> ElementType | None:
    return _BY_NAME.get(name)


def element_for_folder(folder: str) -> ElementType | None:
    """Look up the element type stored under a namespace subfolder."""
    return _BY_FOLDER.get(folder)


def is_valid(name: str) -> bool:
    """Check if a name is in the element catalog."""
    return name in _BY_NAME


def extension_for(name: str) -> str:
    """File extension for an element type (".json" for unknown names)."""
    element = _BY_NAME.get(name)
    return element.extension if element else ".json"


def folder_for(name: str) -> str:
    """Folder under the namespace for an element type (the name itself if unknown)."""
    element = _BY_NAME.get(name)
    return element.directory if element else name


def label_for(name: str) -> str:
    element = _BY_NAME.get(name)
    return element.display_label if element else name


def default_content_for(name: str) -> str:
    """Default file body for an element type.

    Unknown names render an empty JSON object rather than failing, so a
    catalog that lags behind the game still produces a usable file.
    """
    element = _BY_NAME.get(name)
    if element is None:
        return render_json({})
    return element.default_content
