"""The tree of documented entities read from a Doxygen XML output folder."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from .config import Config, DoxybookError
from .enums import Kind, Type, kind_to_type, parse_kind

log = logging.getLogger(__name__)

_LANGUAGE_KINDS = frozenset(
    {
        "namespace",
        "class",
        "struct",
        "interface",
        "function",
        "variable",
        "typedef",
        "enum",
        "slot",
        "signal",
        "union",
    }
)


def is_kind_allowed_language(kind: str) -> bool:
    return kind in _LANGUAGE_KINDS


def is_kind_allowed_group(kind: str) -> bool:
    return kind == "group"


def is_kind_allowed_dirs(kind: str) -> bool:
    return kind in ("dir", "file")


def is_kind_allowed_pages(kind: str) -> bool:
    return kind == "page"


def is_kind_allowed_examples(kind: str) -> bool:
    return kind == "example"


@dataclass(eq=False)
class Node:
    """One documented entity and its place in the tree."""

    refid: str
    kind: Optional[Kind] = None
    name: str = ""
    title: str = ""
    brief: str = ""
    url: str = ""
    parent: Optional["Node"] = field(default=None, repr=False)
    group: Optional["Node"] = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)

    @property
    def type(self) -> Type:
        return kind_to_type(self.kind) if self.kind is not None else Type.NONE

    def add_child(self, child: "Node") -> "Node":
        """Append ``child``, adopting it if it has no parent yet."""
        if child.parent is None:
            child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["Node"]:
        """Yield every descendant, depth first, in child order."""
        for child in self.children:
            yield child
            yield from child.walk()


NodeCache = dict[str, Node]
NodeParser = Callable[[NodeCache, str, str, bool], Node]


@dataclass(frozen=True)
class _IndexEntry:
    kind: str
    refid: str
    name: str


def _read_index(input_dir: str) -> list[_IndexEntry]:
    index_path = os.path.join(input_dir, "index.xml")
    try:
        tree = ET.parse(index_path)
    except (OSError, ET.ParseError) as exc:
        raise DoxybookError(f"Failed to load xml file {index_path} error: {exc}") from exc

    root = tree.getroot()
    if root.tag != "doxygenindex":
        raise DoxybookError(f"Unable to find root element in file {index_path}")

    compounds = root.findall("compound")
    if not compounds:
        raise DoxybookError(f"No <compound> element in file {index_path}")

    entries = []
    for compound in compounds:
        kind = compound.get("kind")
        refid = compound.get("refid")
        if kind is None or refid is None:
            missing = "kind" if kind is None else "refid"
            log.warning("compound error: missing attribute %s", missing)
            continue
        entries.append(_IndexEntry(kind, refid, compound.findtext("name", "")))
    return entries


def get_index_kinds(input_dir: str) -> list[tuple[str, str]]:
    """Return the (kind, refid) pairs listed in ``index.xml``, in document order."""
    return [(entry.kind, entry.refid) for entry in _read_index(input_dir)]


class Doxygen:
    """Loads the compounds of a Doxygen output folder into a tree."""

    def __init__(self, config: Config, parser: Optional[NodeParser] = None) -> None:
        self.config = config
        self.index = Node("index")
        self.cache: NodeCache = {}
        self._parser = parser or self._parse_from_index
        self._entries: dict[str, _IndexEntry] = {}

    def _parse_from_index(
        self, cache: NodeCache, input_dir: str, refid: str, is_group: bool
    ) -> Node:
        entry = self._entries[refid]
        node = Node(refid, parse_kind(entry.kind), entry.name, title=entry.name)
        cache[refid] = node
        return node

    def _load_phase(
        self,
        input_dir: str,
        entries: list[_IndexEntry],
        allowed: Callable[[str], bool],
        is_group: bool,
        is_pages: bool = False,
    ) -> None:
        for entry in entries:
            if not allowed(entry.kind) or entry.refid in self.cache:
                continue
            try:
                child = self._parser(self.cache, input_dir, entry.refid, is_group)
            except Exception as exc:  # a broken compound must not stop the rest
                log.warning("Failed to parse member %s error: %s", entry.refid, exc)
                continue
            self.index.children.append(child)
            if child.parent is None:
                child.parent = self.index
            if is_pages and child.refid == "indexpage":
                child.refid = self.config.main_page_name

    def _cleanup(self) -> None:
        self.index.children = [c for c in self.index.children if c.parent is self.index]

    def load(self, input_dir: str) -> None:
        """Read ``index.xml`` and every compound it lists."""
        entries = _read_index(input_dir)
        self._entries = {entry.refid: entry for entry in entries}

        self._load_phase(input_dir, entries, is_kind_allowed_language, False)
        self._cleanup()
        self._load_phase(input_dir, entries, is_kind_allowed_group, True)
        self._cleanup()
        self._load_phase(input_dir, entries, is_kind_allowed_dirs, True)
        self._cleanup()
        self._load_phase(input_dir, entries, is_kind_allowed_pages, True, is_pages=True)
        self._cleanup()
        self._load_phase(input_dir, entries, is_kind_allowed_examples, True)

        self.rebuild_cache()
        self.update_group_pointers(self.index)

    def rebuild_cache(self) -> None:
        """Register every node of the tree; existing entries are kept."""
        for node in self.index.walk():
            self.cache.setdefault(node.refid, node)

    def update_group_pointers(self, node: Node) -> None:
        """Point the children of every group at that group."""
        if node.kind is Kind.MODULE:
            for child in node.children:
                child.group = node
        for child in node.children:
            if child.kind is Kind.MODULE:
                self.update_group_pointers(child)

    def find(self, refid: str) -> Node:
        try:
            return self.cache[refid]
        except KeyError:
            raise DoxybookError(f"Failed to find node from cache by refid {refid}") from None