"""Writes documentation pages, indexes, summaries and manifests from the node tree."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol

from .config import Config, DoxybookError
from .doxygen import Doxygen, Node
from .enums import (
    FolderCategory,
    Kind,
    to_str,
    type_to_folder_name,
    type_to_index_name,
    type_to_index_template,
    type_to_index_title,
)

log = logging.getLogger(__name__)

_PLACEHOLDER = "{{doxygen}}"

KindFilter = Iterable[Kind]


class JsonConverter(Protocol):
    """Turns nodes into the data handed to templates."""

    def get_as_json(self, node: Node) -> dict[str, Any]: ...

    def convert(self, node: Node) -> dict[str, Any]: ...


class Renderer(Protocol):
    """Renders a named template with data into a file."""

    def render(self, name: str, path: str, data: dict[str, Any]) -> None: ...


@dataclass
class SummarySection:
    """One category listed in a summary file and the kinds it shows."""

    type: FolderCategory
    filter: frozenset[Kind] = field(default_factory=frozenset)
    skip: frozenset[Kind] = field(default_factory=frozenset)


_KIND_TEMPLATE_ATTR = {
    Kind.STRUCT: "template_kind_struct",
    Kind.INTERFACE: "template_kind_interface",
    Kind.UNION: "template_kind_union",
    Kind.CLASS: "template_kind_class",
    Kind.NAMESPACE: "template_kind_namespace",
    Kind.MODULE: "template_kind_group",
    Kind.DIR: "template_kind_dir",
    Kind.FILE: "template_kind_file",
    Kind.PAGE: "template_kind_page",
    Kind.EXAMPLE: "template_kind_example",
}


def _join(folder: str, name: str) -> str:
    return f"{folder}/{name}" if folder else name


class Generator:
    """Produces the output files for a loaded Doxygen tree."""

    def __init__(
        self,
        config: Config,
        doxygen: Doxygen,
        json_converter: Optional[JsonConverter] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.config = config
        self.doxygen = doxygen
        self.json_converter = json_converter
        self.renderer = renderer

    def _converter(self) -> JsonConverter:
        if self.json_converter is None:
            raise DoxybookError("No JSON converter configured")
        return self.json_converter

    def _renderer(self) -> Renderer:
        if self.renderer is None:
            raise DoxybookError("No renderer configured")
        return self.renderer

    def kind_to_template_name(self, kind: Kind) -> str:
        """Return the configured template used for pages of ``kind``."""
        try:
            attr = _KIND_TEMPLATE_ATTR[kind]
        except KeyError:
            raise DoxybookError(f"Unrecognised kind {kind.name}") from None
        return getattr(self.config, attr)

    def summary(self, input_file: str, output_file: str, sections: Iterable[SummarySection]) -> None:
        """Copy ``input_file`` to ``output_file``, expanding ``{{doxygen}}`` into a page list."""
        try:
            with open(input_file, encoding="utf-8") as file:
                tmpl = file.read()
        except OSError as exc:
            raise DoxybookError(f"File {input_file} failed to open for reading") from exc

        offset = tmpl.find(_PLACEHOLDER)
        if offset < 0:
            offset = len(tmpl)
        before = tmpl[:offset]
        indent = len(before) - len(before.rstrip(" "))

        lines: list[str] = []
        for section in sections:
            name = type_to_index_title(self.config, section.type)
            path = type_to_index_name(self.config, section.type) + "." + self.config.file_ext
            lines.append(" " * indent + f"* [{name}]({path})\n")
            self._summary_lines(
                lines, indent + 2, name, self.doxygen.index,
                frozenset(section.filter), frozenset(section.skip),
            )
        listing = "".join(lines)

        result = before + listing[indent:]
        rest = offset + len(_PLACEHOLDER)
        if rest < len(tmpl):
            result += tmpl[rest:]

        try:
            with open(output_file, "w", encoding="utf-8") as file:
                file.write(result)
        except OSError as exc:
            raise DoxybookError(f"File {output_file} failed to open for writing") from exc

    def _summary_lines(
        self,
        lines: list[str],
        indent: int,
        folder_name: str,
        node: Node,
        filter_: frozenset[Kind],
        skip: frozenset[Kind],
    ) -> None:
        for child in node.children:
            if child.kind is Kind.PAGE and child.refid == self.config.main_page_name:
                continue
            if child.kind not in filter_:
                continue
            if child.kind not in skip and self.should_include(child):
                lines.append(" " * indent + f"* [{child.name}]({folder_name}/{child.refid}.md)\n")
            self._summary_lines(lines, indent, folder_name, child, filter_, skip)

    def _selected(self, parent: Node, filter_: frozenset[Kind], skip: frozenset[Kind]):
        """Yield nodes under ``parent`` passing filter, skip and inclusion rules."""
        for child in parent.children:
            if child.kind not in filter_:
                continue
            if child.kind not in skip and self.should_include(child):
                yield child
            yield from self._selected(child, filter_, skip)

    def _page_path(self, node: Node) -> str:
        name = node.refid + "." + self.config.file_ext
        if node.kind is Kind.PAGE and node.refid == self.config.main_page_name:
            return name
        if self.config.use_folders:
            return _join(type_to_folder_name(self.config, node.type), name)
        return name

    def print_pages(self, filter_: KindFilter, skip: KindFilter) -> None:
        """Render a page for every selected node."""
        for child in self._selected(self.doxygen.index, frozenset(filter_), frozenset(skip)):
            data = self._converter().get_as_json(child)
            self._renderer().render(self.kind_to_template_name(child.kind), self._page_path(child), data)

    def write_json(self, filter_: KindFilter, skip: KindFilter) -> None:
        """Write the template data of every selected node as ``<refid>.json``."""
        for child in self._selected(self.doxygen.index, frozenset(filter_), frozenset(skip)):
            data = self._converter().get_as_json(child)
            path = os.path.join(self.config.output_dir, child.refid + ".json")
            self._dump(path, data)

    def manifest(self) -> None:
        """Write ``manifest.json`` describing the whole tree."""
        data = self.build_manifest(self.doxygen.index)
        self._dump(os.path.join(self.config.output_dir, "manifest.json"), data)

    def build_manifest(self, node: Node) -> list[dict[str, Any]]:
        """Return the manifest entries for the children of ``node``."""
        result = []
        for child in node.children:
            if not self.should_include(child):
                continue
            entry: dict[str, Any] = {"kind": to_str(child.kind), "name": child.name}
            if child.kind is Kind.MODULE:
                entry["title"] = child.title
            entry["url"] = child.url
            children = self.build_manifest(child)
            if children:
                entry["children"] = children
            result.append(entry)
        return result

    def print_index(self, category: FolderCategory, filter_: KindFilter, skip: KindFilter) -> None:
        """Render the index page of one category."""
        path = type_to_index_name(self.config, category) + "." + self.config.file_ext
        title = type_to_index_title(self.config, category)
        data = {
            "children": self.build_index(self.doxygen.index, filter_, skip),
            "title": title,
            "name": title,
        }
        self._renderer().render(type_to_index_template(self.config, category), path, data)

    def build_index(self, node: Node, filter_: KindFilter, skip: KindFilter) -> list[dict[str, Any]]:
        """Return the index entries under ``node``, sorted by name at each level."""
        kinds = frozenset(filter_)
        selected = sorted(
            (c for c in node.children if c.kind in kinds and self.should_include(c)),
            key=lambda c: c.name,
        )
        result = []
        for child in selected:
            data = dict(self._converter().convert(child))
            children = self.build_index(child, kinds, skip)
            if children:
                data["children"] = children
            result.append(data)
        return result

    def should_include(self, node: Node) -> bool:
        """Files are included only when their extension passes the files filter."""
        if node.kind is Kind.FILE and self.config.files_filter:
            return os.path.splitext(node.name)[1] in self.config.files_filter
        return True

    @staticmethod
    def _dump(path: str, data: Any) -> None:
        log.info("Rendering %s", path)
        try:
            with open(path, "w", encoding="utf-8") as file:
                json.dump(data, file, indent=2)
        except OSError as exc:
            raise DoxybookError(f"File {path} failed to open for writing") from exc