"""Kinds of documented entities and the names they map to."""

from __future__ import annotations

from enum import Enum, auto
from typing import TypeVar

from .config import Config, DoxybookError


class Kind(Enum):
    CLASS = auto()
    NAMESPACE = auto()
    STRUCT = auto()
    INTERFACE = auto()
    FUNCTION = auto()
    VARIABLE = auto()
    TYPEDEF = auto()
    USING = auto()
    ENUM = auto()
    UNION = auto()
    ENUMVALUE = auto()
    DIR = auto()
    FILE = auto()
    MODULE = auto()
    FRIEND = auto()
    PAGE = auto()
    EXAMPLE = auto()
    SIGNAL = auto()
    SLOT = auto()
    PROPERTY = auto()
    EVENT = auto()
    DEFINE = auto()


class Type(Enum):
    NONE = auto()
    ATTRIBUTES = auto()
    CLASSES = auto()
    DEFINES = auto()
    FILES = auto()
    DIRS = auto()
    FRIENDS = auto()
    FUNCTIONS = auto()
    MODULES = auto()
    NAMESPACES = auto()
    TYPES = auto()
    PAGES = auto()
    EXAMPLES = auto()
    SIGNALS = auto()
    SLOTS = auto()
    EVENTS = auto()
    PROPERTIES = auto()


class Virtual(Enum):
    NON_VIRTUAL = auto()
    VIRTUAL = auto()
    PURE_VIRTUAL = auto()


class Visibility(Enum):
    PUBLIC = auto()
    PROTECTED = auto()
    PRIVATE = auto()
    PACKAGE = auto()


class FolderCategory(Enum):
    MODULES = auto()
    NAMESPACES = auto()
    FILES = auto()
    EXAMPLES = auto()
    CLASSES = auto()
    PAGES = auto()


_KIND_STRS = [
    ("class", Kind.CLASS),
    ("namespace", Kind.NAMESPACE),
    ("struct", Kind.STRUCT),
    ("interface", Kind.INTERFACE),
    ("function", Kind.FUNCTION),
    ("variable", Kind.VARIABLE),
    ("typedef", Kind.TYPEDEF),
    ("using", Kind.USING),
    ("enum", Kind.ENUM),
    ("union", Kind.UNION),
    ("enumvalue", Kind.ENUMVALUE),
    ("dir", Kind.DIR),
    ("file", Kind.FILE),
    ("group", Kind.MODULE),
    ("friend", Kind.FRIEND),
    ("page", Kind.PAGE),
    ("example", Kind.EXAMPLE),
    ("signal", Kind.SIGNAL),
    ("slot", Kind.SLOT),
    ("property", Kind.PROPERTY),
    ("event", Kind.EVENT),
    ("define", Kind.DEFINE),
]

_TYPE_STRS = [
    ("attributes", Type.ATTRIBUTES),
    ("classes", Type.CLASSES),
    ("defines", Type.DEFINES),
    ("files", Type.FILES),
    ("dirs", Type.DIRS),
    ("friends", Type.FRIENDS),
    ("functions", Type.FUNCTIONS),
    ("modules", Type.MODULES),
    ("namespaces", Type.NAMESPACES),
    ("types", Type.TYPES),
    ("pages", Type.PAGES),
    ("examples", Type.EXAMPLES),
    ("signals", Type.SIGNALS),
    ("slots", Type.SLOTS),
    ("events", Type.EVENTS),
    ("properties", Type.PROPERTIES),
]

_VIRTUAL_STRS = [
    ("non-virtual", Virtual.NON_VIRTUAL),
    ("virtual", Virtual.VIRTUAL),
    ("pure", Virtual.PURE_VIRTUAL),
    ("pure-virtual", Virtual.PURE_VIRTUAL),
]

_VISIBILITY_STRS = [
    ("public", Visibility.PUBLIC),
    ("protected", Visibility.PROTECTED),
    ("private", Visibility.PRIVATE),
    ("package", Visibility.PACKAGE),
]

_FOLDER_CATEGORY_STRS = [
    ("modules", FolderCategory.MODULES),
    ("namespaces", FolderCategory.NAMESPACES),
    ("files", FolderCategory.FILES),
    ("examples", FolderCategory.EXAMPLES),
    ("classes", FolderCategory.CLASSES),
    ("pages", FolderCategory.PAGES),
]

_TABLES = {
    Kind: _KIND_STRS,
    Type: _TYPE_STRS,
    Virtual: _VIRTUAL_STRS,
    Visibility: _VISIBILITY_STRS,
    FolderCategory: _FOLDER_CATEGORY_STRS,
}

E = TypeVar("E", bound=Enum)


def _parse(enum_cls: type[E], text: str) -> E:
    for name, value in _TABLES[enum_cls]:
        if name == text:
            return value
    raise DoxybookError(
        f"String '{text}' not recognised as a valid enum of '{enum_cls.__name__}'"
    )


def parse_kind(text: str) -> Kind:
    return _parse(Kind, text)


def parse_type(text: str) -> Type:
    return _parse(Type, text)


def parse_virtual(text: str) -> Virtual:
    return _parse(Virtual, text)


def parse_visibility(text: str) -> Visibility:
    return _parse(Visibility, text)


def parse_folder_category(text: str) -> FolderCategory:
    return _parse(FolderCategory, text)


def to_str(value: Enum) -> str:
    """Return the canonical string of an enum member."""
    table = _TABLES.get(type(value), [])
    for name, member in table:
        if member is value:
            return name
    raise DoxybookError(
        f"Enum '{type(value).__name__}' of value '{value.name}' not recognised"
    )


_KIND_TO_TYPE = {
    Kind.DEFINE: Type.DEFINES,
    Kind.FRIEND: Type.FRIENDS,
    Kind.VARIABLE: Type.ATTRIBUTES,
    Kind.FUNCTION: Type.FUNCTIONS,
    Kind.ENUMVALUE: Type.TYPES,
    Kind.ENUM: Type.TYPES,
    Kind.USING: Type.TYPES,
    Kind.TYPEDEF: Type.TYPES,
    Kind.MODULE: Type.MODULES,
    Kind.NAMESPACE: Type.NAMESPACES,
    Kind.UNION: Type.CLASSES,
    Kind.INTERFACE: Type.CLASSES,
    Kind.STRUCT: Type.CLASSES,
    Kind.CLASS: Type.CLASSES,
    Kind.FILE: Type.FILES,
    Kind.DIR: Type.DIRS,
    Kind.PAGE: Type.PAGES,
    Kind.EXAMPLE: Type.EXAMPLES,
    Kind.SIGNAL: Type.SIGNALS,
    Kind.SLOT: Type.SLOTS,
    Kind.EVENT: Type.EVENTS,
    Kind.PROPERTY: Type.PROPERTIES,
}


def kind_to_type(kind: Kind) -> Type:
    return _KIND_TO_TYPE.get(kind, Type.NONE)


_STRUCTURED = frozenset(
    {Kind.CLASS, Kind.NAMESPACE, Kind.STRUCT, Kind.UNION, Kind.INTERFACE}
)

_LANGUAGE = frozenset(
    {
        Kind.DEFINE, Kind.CLASS, Kind.NAMESPACE, Kind.STRUCT, Kind.UNION,
        Kind.INTERFACE, Kind.ENUM, Kind.FUNCTION, Kind.TYPEDEF, Kind.USING,
        Kind.FRIEND, Kind.VARIABLE, Kind.SIGNAL, Kind.SLOT, Kind.PROPERTY,
        Kind.EVENT,
    }
)


def is_kind_structured(kind: Kind) -> bool:
    return kind in _STRUCTURED


def is_kind_language(kind: Kind) -> bool:
    return kind in _LANGUAGE


def is_kind_file(kind: Kind) -> bool:
    return kind in (Kind.DIR, Kind.FILE)


_CATEGORY_FOLDER_ATTR = {
    FolderCategory.MODULES: "folder_groups_name",
    FolderCategory.CLASSES: "folder_classes_name",
    FolderCategory.NAMESPACES: "folder_namespaces_name",
    FolderCategory.FILES: "folder_files_name",
    FolderCategory.PAGES: "folder_related_pages_name",
    FolderCategory.EXAMPLES: "folder_examples_name",
}

_TYPE_FOLDER_ATTR = {
    Type.MODULES: "folder_groups_name",
    Type.CLASSES: "folder_classes_name",
    Type.NAMESPACES: "folder_namespaces_name",
    Type.DIRS: "folder_files_name",
    Type.FILES: "folder_files_name",
    Type.PAGES: "folder_related_pages_name",
    Type.EXAMPLES: "folder_examples_name",
}

_CATEGORY_INDEX_ATTR = {
    FolderCategory.MODULES: "index_groups_name",
    FolderCategory.CLASSES: "index_classes_name",
    FolderCategory.NAMESPACES: "index_namespaces_name",
    FolderCategory.FILES: "index_files_name",
    FolderCategory.PAGES: "index_related_pages_name",
    FolderCategory.EXAMPLES: "index_examples_name",
}

_CATEGORY_TEMPLATE_ATTR = {
    FolderCategory.MODULES: "template_index_groups",
    FolderCategory.CLASSES: "template_index_classes",
    FolderCategory.NAMESPACES: "template_index_namespaces",
    FolderCategory.FILES: "template_index_files",
    FolderCategory.PAGES: "template_index_related_pages",
    FolderCategory.EXAMPLES: "template_index_examples",
}

_CATEGORY_TITLE_ATTR = {
    FolderCategory.MODULES: "index_groups_title",
    FolderCategory.CLASSES: "index_classes_title",
    FolderCategory.NAMESPACES: "index_namespaces_title",
    FolderCategory.FILES: "index_files_title",
    FolderCategory.PAGES: "index_related_pages_title",
    FolderCategory.EXAMPLES: "index_examples_title",
}


def _lookup(config: Config, table: dict, key: Enum) -> str:
    try:
        attr = table[key]
    except KeyError:
        raise DoxybookError(f"{type(key).__name__} {key.name} not recognised") from None
    return getattr(config, attr)


def folder_category_to_folder_name(config: Config, category: FolderCategory) -> str:
    if not config.use_folders:
        return ""
    return _lookup(config, _CATEGORY_FOLDER_ATTR, category)


def type_to_folder_name(config: Config, type_: Type) -> str:
    if not config.use_folders:
        return ""
    return _lookup(config, _TYPE_FOLDER_ATTR, type_)


def type_to_index_name(config: Config, category: FolderCategory) -> str:
    name = _lookup(config, _CATEGORY_INDEX_ATTR, category)
    if config.index_in_folders and config.use_folders:
        return _lookup(config, _CATEGORY_FOLDER_ATTR, category) + "/" + name
    return name


def type_to_index_template(config: Config, category: FolderCategory) -> str:
    return _lookup(config, _CATEGORY_TEMPLATE_ATTR, category)


def type_to_index_title(config: Config, category: FolderCategory) -> str:
    return _lookup(config, _CATEGORY_TITLE_ATTR, category)