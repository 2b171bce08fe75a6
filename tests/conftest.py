"""Pytest configuration and shared fixtures.

Following Linus's principle: "Simplicity is the ultimate sophistication."
Builds one miniature ketho.wow-api extension that exercises every load pass.
"""

import os
import sys
import tempfile
import pytest
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from wow_api_mcp.indexing.api_index_builder import build_api_index


EXTENSION_FILES = {
    "package.json": '{"name": "wow-api", "version": "0.20.3"}\n',

    "out/data/flavor.js": '''"use strict";
Object.defineProperty(exports, "__esModule", { value: true });
exports.data = {
\t["IsSpellKnown"]: 0x5,
\t["GetSpellInfo"]: 0x7,
\t["C_SpellBook.IsSpellInSpellBook"]: 0x1,
\t["UnitName"]: 3,
};
''',

    "out/data/deprecated.js": '''"use strict";
Object.defineProperty(exports, "__esModule", { value: true });
exports.data = [
\t"GetSpellInfo",
\t"OldWikiFunc",
];
''',

    "Annotations/Core/Blizzard_APIDocumentationGenerated/SpellBookDocumentation.lua": '''---@meta _
C_SpellBook = {}

---Returns true if the spell is in the spell book.
---[Documentation](https://warcraft.wiki.gg/wiki/API_C_SpellBook.IsSpellInSpellBook)
---@param spellID number
---@param includeOverrides? boolean Whether overrides count
---@return boolean isKnown
function C_SpellBook.IsSpellInSpellBook(spellID, includeOverrides) end

---[Documentation](https://warcraft.wiki.gg/wiki/API_C_SpellBook.GetSpellBookItemName)
---@param index number
---@return string name
---@return string? subName
function C_SpellBook.GetSpellBookItemName(index) end

---@class SpellBookItemInfo
---@field itemType Enum.SpellBookItemType
---@field name string
---@field isPassive? boolean Passive spells cannot be cast
local SpellBookItemInfo = {}
''',

    "Annotations/Core/Blizzard_APIDocumentationGenerated/SpellDocumentation.lua": '''---[Documentation](https://warcraft.wiki.gg/wiki/API_C_Spell.GetSpellInfo)
---@param spellIdentifier number|string
---@return SpellInfo spellInfo
function C_Spell.GetSpellInfo(spellIdentifier) end

---Old spellbook check.
---@param spellID number
---@return boolean isKnown
function C_SpellBook.IsSpellKnown(spellID) end
''',

    "Annotations/Core/FrameXML/Blizzard_Deprecated/Deprecated_11_0_0.lua": '''---@deprecated
---Deprecated by [C_SpellBook.IsSpellInSpellBook](https://warcraft.wiki.gg/wiki/API_C_SpellBook.IsSpellInSpellBook)
---@param spellID number
---@return boolean isKnown
function C_SpellBook.IsSpellKnown(spellID) end

---@deprecated
---Deprecated by [C_SpellBook.IsSpellInSpellBook](https://warcraft.wiki.gg/wiki/API_C_SpellBook.IsSpellInSpellBook)
---@param spellID number
---@param isPet? boolean
---@return boolean isKnown
function IsSpellKnown(spellID, isPet) end
''',

    "Annotations/Core/FrameXML/Blizzard_Deprecated/Deprecated_10_1_5.lua": '''function GetSpellBookItemName(index, bookType) end
''',

    "Annotations/Core/Data/Wiki.lua": '''---[Documentation](https://warcraft.wiki.gg/wiki/API_UnitName)
---Returns the name and realm of the unit.
---@param unit string
---@return string name
---@return string? realm
function UnitName(unit) end

---@param spellID number
function GetSpellInfo(spellID) end

---Wiki copy with different text.
---@param spellID number
---@param extra string
function C_SpellBook.IsSpellInSpellBook(spellID, extra) end

---Something old.
function OldWikiFunc() end
''',

    "Annotations/Core/Widget/ScriptRegion.lua": '''---@class ScriptRegion : Object
---[Documentation](https://warcraft.wiki.gg/wiki/UIOBJECT_ScriptRegion)
local ScriptRegion = {}

---[Documentation](https://warcraft.wiki.gg/wiki/API_ScriptRegion_Show)
function ScriptRegion:Show() end

---@return boolean isShown
function ScriptRegion:IsShown() end
''',

    "Annotations/Core/Widget/Frame.lua": '''---@class Frame : Region, ScriptObject
---@field unit? string Unit token watched by the frame
local Frame = {}

---@param event FrameEvent
---@return boolean registered
function Frame:RegisterEvent(event) end
''',

    "Annotations/Core/Widget/Mixins.lua": '''function AnimatableMixin:Play() end
''',

    "Annotations/Core/FrameXML/Blizzard_SharedXML/Util.lua": '''---@class ColorMixin
local ColorMixin = {}

function ColorMixin:GetRGB() end

---@param text string
function CreateColor(text) end

function UnitName(unit) end
''',

    "Annotations/Core/FrameXML/Blizzard_Unlisted/Ignored.lua": '''function IgnoredFunc() end
''',

    "Annotations/Core/Data/Enum.lua": '''---@meta _
Enum = {}

---@enum Enum.SpellBookSpellBank
Enum.SpellBookSpellBank = {
\tPlayer = 0,
\tPet = 1,
}

---@enum Enum.SpellBookItemType
Enum.SpellBookItemType = {
\tNone = 0,
\tSpell = 1,
\tFutureSpell = 2,
\tPetAction = 3,
\tFlyout = 4,
}
''',

    "Annotations/Core/Data/Event.lua": '''---@meta _

---@alias FrameEvent string
---|"ADDON_LOADED" # `addOnName, containsBindings`
---|"PLAYER_LOGIN"
---|"PLAYER_ENTERING_WORLD" # `isInitialLogin, isReloadingUi`
---|"SPELLS_CHANGED"
''',

    "Annotations/Core/Data/CVar.lua": '''---@alias CVar string
---|"autoLootDefault"
---|"nameplateShowEnemies"
''',
}


def write_extension(root: Path, files=None) -> Path:
    """Write an extension tree below ``root`` and return its path."""
    for relative_path, content in (files or EXTENSION_FILES).items():
        file_path = root / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture(scope="session")
def extension_root():
    """A complete sample extension, shared by the whole session."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield write_extension(Path(temp_dir) / "ketho.wow-api-0.20.3")


@pytest.fixture(scope="session")
def api_index(extension_root):
    """Index built from the sample extension."""
    return build_api_index(str(extension_root))


@pytest.fixture
def empty_extension():
    """An extension directory with an empty annotation tree and no side files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir) / "ketho.wow-api-0.0.1"
        (root / "Annotations" / "Core").mkdir(parents=True)
        yield root


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the configuration reads, and drop the cached config."""
    from wow_api_mcp.config import reset_config

    for key in ("WOW_API_EXT_PATH", "WOW_API_EXTENSION_PREFIX", "WOW_API_LOG_LEVEL",
                "USERPROFILE", "HOME"):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location/name."""
    for item in items:
        if "test_index_builder" in item.nodeid or "test_mcp_server" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
