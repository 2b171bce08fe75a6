"""
API Index Builder - folds every documentation pass into one ApiIndex.

Pass order encodes the authority of each documentation set and must not be
reordered:

1. flavor table and deprecated-name list (side tables)
2. Blizzard generated documentation   - every function, first writer
3. deprecated API files               - forced deprecated, always overwrites
4. Wiki.lua                           - only names not seen yet
5. widget documentation               - unconditional, methods attached to owners
6. FrameXML subdirectories            - only names not seen yet
7. enum, event and CVar tables
8. game version enrichment
"""

import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, TypeVar

from ..config import ExtensionConfig, get_config
from ..core.index import ApiIndex
from ..utils.file_walker import FileWalker
from .strategies import (
    LuaAnnotationStrategy,
    ParsedLuaFile,
    extract_patch_from_filename,
    parse_cvar_file,
    parse_deprecated_file,
    parse_enum_file,
    parse_event_file,
    parse_flavor_file,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ANNOTATIONS_CORE = os.path.join("Annotations", "Core")
FLAVOR_FILE = os.path.join("out", "data", "flavor.js")
DEPRECATED_LIST_FILE = os.path.join("out", "data", "deprecated.js")
BLIZZARD_DOC_DIR = "Blizzard_APIDocumentationGenerated"
DEPRECATED_DIR = os.path.join("FrameXML", "Blizzard_Deprecated")
WIKI_FILE = os.path.join("Data", "Wiki.lua")
WIDGET_DIR = "Widget"
FRAMEXML_DIR = "FrameXML"
FRAMEXML_SUBDIRS = (
    "Blizzard_FrameXML",
    "Blizzard_ObjectAPI",
    "Blizzard_SharedXML",
    "Blizzard_Menu",
    "Blizzard_NamePlates",
)
ENUM_FILE = os.path.join("Data", "Enum.lua")
EVENT_FILE = os.path.join("Data", "Event.lua")
CVAR_FILE = os.path.join("Data", "CVar.lua")


class ApiIndexBuilder:
    """
    Builds an ApiIndex from a ketho.wow-api extension directory.

    Each ``build_index`` call starts from an empty index, so repeated builds
    over an unchanged extension produce equal results.
    """

    def __init__(self, extension_path: str):
        self.extension_path = str(extension_path)
        self.annotations_core = os.path.join(self.extension_path, ANNOTATIONS_CORE)
        self.strategy = LuaAnnotationStrategy()
        self.file_walker = FileWalker(self.strategy.get_supported_extensions())
        self.index = ApiIndex()

    def build_index(self) -> ApiIndex:
        """Run every pass in order and return the finished index."""
        start_time = time.time()
        self.index = ApiIndex()
        self.index.extension_version = self._read_extension_version()

        self._load_side_tables()
        self._index_blizzard_docs()
        self._index_deprecated_docs()
        self._index_wiki_docs()
        self._index_widget_docs()
        self._index_framexml_docs()
        self._load_data_tables()
        self._apply_flavor_data()

        elapsed = time.time() - start_time
        stats = self.index.get_stats()
        logger.info(
            f"Built API index with {stats['total_functions']} functions "
            f"({stats['deprecated_functions']} deprecated) in {elapsed:.2f}s"
        )
        return self.index

    # ----- helpers -----

    def _core_path(self, *parts: str) -> str:
        return os.path.join(self.annotations_core, *parts)

    def _read_extension_version(self) -> str:
        package_json = os.path.join(self.extension_path, "package.json")
        try:
            with open(package_json, "r", encoding="utf-8-sig") as f:
                return str(json.load(f)["version"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.debug(f"No extension version in {package_json}: {e}")
            return "unknown"

    def _load_optional(self, file_path: str, parser: Callable[[str], T], default: T) -> T:
        """Parse a side file; a missing or unreadable file yields ``default``."""
        if not os.path.isfile(file_path):
            logger.info(f"Optional data file not found: {file_path}")
            return default
        try:
            return parser(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {file_path}: {e}")
            return default

    def _parse_lua_file(self, file_path: Path) -> Optional[ParsedLuaFile]:
        try:
            return self.strategy.parse_file(str(file_path))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error processing {file_path}: {e}")
            return None

    def _parse_directory(self, directory: str) -> List[ParsedLuaFile]:
        return self.file_walker.walk_with_callback(directory, self._parse_lua_file)

    # ----- passes -----

    def _load_side_tables(self) -> None:
        self.index.flavor_map = self._load_optional(
            os.path.join(self.extension_path, FLAVOR_FILE), parse_flavor_file, {}
        )
        self.index.deprecated_names = set(self._load_optional(
            os.path.join(self.extension_path, DEPRECATED_LIST_FILE), parse_deprecated_file, []
        ))
        logger.info(
            f"Loaded {len(self.index.flavor_map)} flavor entries, "
            f"{len(self.index.deprecated_names)} deprecated names"
        )

    def _index_blizzard_docs(self) -> None:
        for parsed in self._parse_directory(self._core_path(BLIZZARD_DOC_DIR)):
            for func in parsed.functions:
                self.index.add_function(func, "blizzard")
            for class_info in parsed.classes:
                self.index.add_class(class_info)
        logger.info(f"Blizzard documentation pass: {len(self.index.functions)} functions")

    def _index_deprecated_docs(self) -> None:
        for file_path in self.file_walker.walk_files(self._core_path(DEPRECATED_DIR)):
            parsed = self._parse_lua_file(file_path)
            if parsed is None:
                continue
            patch_version = extract_patch_from_filename(str(file_path))
            for func in parsed.functions:
                func.deprecated = True
                func.deprecated_in_patch = patch_version
                self.index.add_function(func, "deprecated")

    def _index_wiki_docs(self) -> None:
        wiki_path = self._core_path(WIKI_FILE)
        if not os.path.isfile(wiki_path):
            logger.info(f"Wiki annotations not found: {wiki_path}")
            return
        parsed = self._parse_lua_file(Path(wiki_path))
        if parsed is None:
            return
        for func in parsed.functions:
            if (func.name or func.full_name) in self.index.deprecated_names:
                func.deprecated = True
            if not self.index.has_function(func.full_name):
                self.index.add_function(func, "wiki")

    def _index_widget_docs(self) -> None:
        for parsed in self._parse_directory(self._core_path(WIDGET_DIR)):
            for class_info in parsed.classes:
                self.index.add_class(class_info)
            for func in parsed.functions:
                self.index.add_function(func, "widget")
                if func.is_method and func.namespace:
                    self.index.add_widget_method(func)
        logger.info(f"Widget documentation pass: {len(self.index.widgets)} widget types")

    def _index_framexml_docs(self) -> None:
        for subdir in FRAMEXML_SUBDIRS:
            for parsed in self._parse_directory(self._core_path(FRAMEXML_DIR, subdir)):
                for class_info in parsed.classes:
                    self.index.add_class(class_info)
                for func in parsed.functions:
                    if not self.index.has_function(func.full_name):
                        self.index.add_function(func, "framexml")

    def _load_data_tables(self) -> None:
        self.index.enums = self._load_optional(self._core_path(ENUM_FILE), parse_enum_file, {})
        self.index.events = self._load_optional(self._core_path(EVENT_FILE), parse_event_file, {})
        self.index.cvars = self._load_optional(self._core_path(CVAR_FILE), parse_cvar_file, [])
        logger.info(
            f"Loaded {len(self.index.enums)} enums, {len(self.index.events)} events, "
            f"{len(self.index.cvars)} cvars"
        )

    def _apply_flavor_data(self) -> None:
        flavor_map: Dict[str, List[str]] = self.index.flavor_map
        for full_name, func in self.index.functions.items():
            short_name = func.name or full_name
            if short_name in flavor_map:
                func.game_versions = list(flavor_map[short_name])
            elif full_name in flavor_map:
                func.game_versions = list(flavor_map[full_name])
            else:
                func.game_versions = []


def build_api_index(extension_path: str) -> ApiIndex:
    """Build an index from an explicit extension root."""
    return ApiIndexBuilder(extension_path).build_index()


def load_api_index(config: Optional[ExtensionConfig] = None) -> ApiIndex:
    """
    Locate the extension and build a fresh index from it.

    Raises:
        ConfigurationError: no extension root could be resolved
    """
    config = config or get_config()
    return build_api_index(str(config.require_extension_path()))
