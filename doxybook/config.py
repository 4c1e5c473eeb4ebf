"""Generator configuration and its JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from typing import Any

log = logging.getLogger(__name__)


class DoxybookError(Exception):
    """Raised for any failure while configuring or generating documentation."""


def _opt(key: str, default: Any) -> Any:
    if isinstance(default, list):
        return field(default_factory=lambda: list(default), metadata={"key": key})
    return field(default=default, metadata={"key": key})


@dataclass
class Config:
    """All options that control how the documentation is generated."""

    base_url: str = _opt("baseUrl", "")
    file_ext: str = _opt("fileExt", "md")
    link_suffix: str = _opt("linkSuffix", ".md")
    link_lowercase: bool = _opt("linkLowercase", False)
    link_and_inline_code_as_html: bool = _opt("linkAndInlineCodeAsHTML", False)
    copy_images: bool = _opt("copyImages", True)
    sort: bool = _opt("sort", False)
    use_folders: bool = _opt("useFolders", True)
    images_folder: str = _opt("imagesFolder", "images")
    main_page_name: str = _opt("mainPageName", "indexpage")
    main_page_in_root: bool = _opt("mainPageInRoot", False)
    folder_classes_name: str = _opt("folderClassesName", "Classes")
    folder_files_name: str = _opt("folderFilesName", "Files")
    folder_groups_name: str = _opt("folderGroupsName", "Modules")
    folder_namespaces_name: str = _opt("folderNamespacesName", "Namespaces")
    folder_related_pages_name: str = _opt("folderRelatedPagesName", "Pages")
    folder_examples_name: str = _opt("folderExamplesName", "Examples")
    index_in_folders: bool = _opt("indexInFolders", False)
    index_classes_name: str = _opt("indexClassesName", "index_classes")
    index_files_name: str = _opt("indexFilesName", "index_files")
    index_groups_name: str = _opt("indexGroupsName", "index_groups")
    index_namespaces_name: str = _opt("indexNamespacesName", "index_namespaces")
    index_related_pages_name: str = _opt("indexRelatedPagesName", "index_pages")
    index_examples_name: str = _opt("indexExamplesName", "index_examples")
    template_index_classes: str = _opt("templateIndexClasses", "index_classes")
    template_index_files: str = _opt("templateIndexFiles", "index_files")
    template_index_groups: str = _opt("templateIndexGroups", "index_groups")
    template_index_namespaces: str = _opt("templateIndexNamespaces", "index_namespaces")
    template_index_related_pages: str = _opt("templateIndexRelatedPages", "index_pages")
    template_index_examples: str = _opt("templateIndexExamples", "index_examples")
    template_kind_group: str = _opt("templateKindGroup", "kind_group")
    template_kind_class: str = _opt("templateKindClass", "kind_class")
    template_kind_dir: str = _opt("templateKindDir", "kind_file")
    template_kind_page: str = _opt("templateKindPage", "kind_page")
    template_kind_interface: str = _opt("templateKindInterface", "kind_class")
    template_kind_file: str = _opt("templateKindFile", "kind_file")
    template_kind_namespace: str = _opt("templateKindNamespace", "kind_nonclass")
    template_kind_struct: str = _opt("templateKindStruct", "kind_class")
    template_kind_union: str = _opt("templateKindUnion", "kind_class")
    template_kind_example: str = _opt("templateKindExample", "kind_example")
    index_classes_title: str = _opt("indexClassesTitle", "Classes")
    index_namespaces_title: str = _opt("indexNamespacesTitle", "Namespaces")
    index_groups_title: str = _opt("indexGroupsTitle", "Modules")
    index_related_pages_title: str = _opt("indexRelatedPagesTitle", "Pages")
    index_files_title: str = _opt("indexFilesTitle", "Files")
    index_examples_title: str = _opt("indexExamplesTitle", "Examples")
    files_filter: list[str] = _opt("filesFilter", [])
    folders_to_generate: list[str] = _opt(
        "foldersToGenerate",
        ["modules", "classes", "files", "pages", "namespaces", "examples"],
    )
    formula_inline_start: str = _opt("formulaInlineStart", "\\(")
    formula_inline_end: str = _opt("formulaInlineEnd", "\\)")
    formula_block_start: str = _opt("formulaBlockStart", "\\[")
    formula_block_end: str = _opt("formulaBlockEnd", "\\]")
    # Set from the command line, never stored in the config file.
    output_dir: str = field(default="")

    @classmethod
    def _keyed_fields(cls):
        return [f for f in fields(cls) if "key" in f.metadata]

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted options keyed by their JSON names."""
        result: dict[str, Any] = {}
        for f in self._keyed_fields():
            value = getattr(self, f.name)
            result[f.metadata["key"]] = list(value) if isinstance(value, list) else value
        return result

    def update_from_dict(self, data: Any) -> None:
        """Overwrite the options present in ``data``; others keep their values."""
        if not isinstance(data, dict):
            return
        for f in self._keyed_fields():
            key = f.metadata["key"]
            if key not in data:
                continue
            try:
                value = _coerce(getattr(self, f.name), data[key])
            except TypeError as exc:
                raise DoxybookError(f"Failed to get config value {key} error: {exc}") from exc
            setattr(self, f.name, value)


def _coerce(current: Any, value: Any) -> Any:
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise TypeError(f"type must be boolean, but is {type(value).__name__}")
        return value
    if isinstance(current, str):
        if not isinstance(value, str):
            raise TypeError(f"type must be string, but is {type(value).__name__}")
        return value
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError("type must be an array of strings")
    return list(value)


def load_config_data(src: str, config: Config) -> Config:
    """Update ``config`` from a JSON document held in a string."""
    try:
        data = json.loads(src)
    except ValueError as exc:
        raise DoxybookError(f"Failed to parse config error {exc}") from exc
    config.update_from_dict(data)
    return config


def load_config(path: str, config: Config) -> Config:
    """Update ``config`` from the JSON file at ``path``."""
    try:
        with open(path, encoding="utf-8") as file:
            src = file.read()
    except OSError as exc:
        raise DoxybookError(f"Failed to open file {path} for reading") from exc
    return load_config_data(src, config)


def save_config(config: Config, path: str) -> None:
    """Write ``config`` as JSON to ``path``."""
    log.info("Creating default config %s", path)
    try:
        with open(path, "w", encoding="utf-8") as file:
            json.dump(config.to_dict(), file, indent=2, sort_keys=True)
    except OSError as exc:
        raise DoxybookError(f"Failed to open file {path} for writing") from exc