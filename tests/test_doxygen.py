import logging

import pytest

from doxybook.config import Config, DoxybookError
from doxybook.doxygen import (
    Doxygen,
    Node,
    get_index_kinds,
    is_kind_allowed_dirs,
    is_kind_allowed_examples,
    is_kind_allowed_group,
    is_kind_allowed_language,
    is_kind_allowed_pages,
)
from doxybook.enums import Kind, Type


def write_index(directory, compounds, root="doxygenindex"):
    body = "".join(
        f'<compound kind="{kind}" refid="{refid}"><name>{name}</name></compound>'
        for kind, refid, name in compounds
    )
    (directory / "index.xml").write_text(
        f'<?xml version="1.0"?><{root}>{body}</{root}>', encoding="utf-8"
    )
    return str(directory)


SAMPLE = [
    ("file", "file_a", "a.hpp"),
    ("class", "class_engine", "Engine"),
    ("page", "indexpage", "Main"),
    ("group", "group_audio", "Audio"),
    ("example", "example_1", "example-1.cpp"),
    ("namespace", "namespace_engine", "Engine"),
]


def test_kind_predicates():
    assert is_kind_allowed_language("class")
    assert is_kind_allowed_language("union")
    assert not is_kind_allowed_language("file")
    assert is_kind_allowed_group("group")
    assert not is_kind_allowed_group("page")
    assert is_kind_allowed_dirs("dir") and is_kind_allowed_dirs("file")
    assert is_kind_allowed_pages("page")
    assert is_kind_allowed_examples("example")
    assert not is_kind_allowed_examples("page")


def test_get_index_kinds_in_document_order(tmp_path):
    path = write_index(tmp_path, SAMPLE)
    assert get_index_kinds(path) == [(k, r) for k, r, _ in SAMPLE]


def test_get_index_kinds_skips_compound_without_refid(tmp_path):
    (tmp_path / "index.xml").write_text(
        '<doxygenindex><compound kind="class"/>'
        '<compound kind="class" refid="class_engine"/></doxygenindex>',
        encoding="utf-8",
    )
    assert get_index_kinds(str(tmp_path)) == [("class", "class_engine")]


def test_wrong_root_raises(tmp_path):
    path = write_index(tmp_path, SAMPLE, root="other")
    with pytest.raises(DoxybookError):
        get_index_kinds(path)


def test_no_compounds_raises(tmp_path):
    path = write_index(tmp_path, [])
    with pytest.raises(DoxybookError):
        get_index_kinds(path)


def test_missing_index_raises(tmp_path):
    with pytest.raises(DoxybookError):
        Doxygen(Config()).load(str(tmp_path))


def test_load_orders_phases(tmp_path):
    doxygen = Doxygen(Config())
    doxygen.load(write_index(tmp_path, SAMPLE))
    refids = [child.refid for child in doxygen.index.children]
    assert refids == [
        "class_engine",
        "namespace_engine",
        "group_audio",
        "file_a",
        "indexpage",
        "example_1",
    ]
    assert all(child.parent is doxygen.index for child in doxygen.index.children)


def test_main_page_is_renamed(tmp_path):
    config = Config(main_page_name="home")
    doxygen = Doxygen(config)
    doxygen.load(write_index(tmp_path, SAMPLE))
    page = doxygen.find("home")
    assert page.kind is Kind.PAGE
    assert page.type is Type.PAGES


def test_find_unknown_raises(tmp_path):
    doxygen = Doxygen(Config())
    doxygen.load(write_index(tmp_path, SAMPLE))
    with pytest.raises(DoxybookError):
        doxygen.find("missing_refid")


def test_duplicate_refid_loaded_once(tmp_path):
    compounds = [("class", "class_engine", "Engine"), ("class", "class_engine", "Engine")]
    doxygen = Doxygen(Config())
    doxygen.load(write_index(tmp_path, compounds))
    assert len(doxygen.index.children) == 1
    assert doxygen.find("class_engine").name == "Engine"


def test_parser_failure_is_skipped(tmp_path, caplog):
    def parser(cache, input_dir, refid, is_group):
        if refid == "class_engine":
            raise ValueError("broken")
        node = Node(refid, Kind.NAMESPACE, refid)
        cache[refid] = node
        return node

    compounds = [("class", "class_engine", "Engine"), ("namespace", "namespace_engine", "Engine")]
    doxygen = Doxygen(Config(), parser=parser)
    with caplog.at_level(logging.WARNING):
        doxygen.load(write_index(tmp_path, compounds))
    assert [c.refid for c in doxygen.index.children] == ["namespace_engine"]
    assert "class_engine" in caplog.text


def test_reparented_nodes_leave_index(tmp_path):
    calls = []

    def parser(cache, input_dir, refid, is_group):
        calls.append((refid, is_group))
        if refid == "namespace_engine":
            ns = Node(refid, Kind.NAMESPACE, "Engine")
            cls = ns.add_child(Node("class_engine", Kind.CLASS, "Engine::Foo"))
            cache[refid] = ns
            cache["class_engine"] = cls
            return ns
        node = Node(refid, Kind.CLASS, refid)
        cache[refid] = node
        return node

    compounds = [("namespace", "namespace_engine", "Engine"), ("class", "class_engine", "Foo")]
    doxygen = Doxygen(Config(), parser=parser)
    doxygen.load(write_index(tmp_path, compounds))
    assert [c.refid for c in doxygen.index.children] == ["namespace_engine"]
    assert doxygen.find("class_engine").parent is doxygen.find("namespace_engine")
    assert calls == [("namespace_engine", False)]


def test_group_pointers(tmp_path):
    def parser(cache, input_dir, refid, is_group):
        group = Node(refid, Kind.MODULE, "Audio")
        sub = group.add_child(Node("group_sub", Kind.MODULE, "Sub"))
        sub.add_child(Node("class_buffer", Kind.CLASS, "Buffer"))
        cache[refid] = group
        return group

    doxygen = Doxygen(Config(), parser=parser)
    doxygen.load(write_index(tmp_path, [("group", "group_audio", "Audio")]))
    group = doxygen.find("group_audio")
    sub = doxygen.find("group_sub")
    assert sub.group is group
    assert doxygen.find("class_buffer").group is sub
    assert group.group is None


def test_rebuild_cache_keeps_existing(tmp_path):
    doxygen = Doxygen(Config())
    other = Node("class_engine", Kind.STRUCT)
    doxygen.cache["class_engine"] = other
    doxygen.index.add_child(Node("class_engine", Kind.CLASS))
    doxygen.index.add_child(Node("namespace_engine", Kind.NAMESPACE))
    doxygen.rebuild_cache()
    assert doxygen.find("class_engine") is other
    assert doxygen.find("namespace_engine").kind is Kind.NAMESPACE


def test_node_walk_and_add_child():
    root = Node("root")
    a = root.add_child(Node("a", Kind.NAMESPACE))
    b = a.add_child(Node("b", Kind.CLASS))
    c = root.add_child(Node("c", Kind.FILE))
    assert [n.refid for n in root.walk()] == ["a", "b", "c"]
    assert b.parent is a and c.parent is root
    assert root.type is Type.NONE
    assert c.type is Type.FILES


def test_add_child_keeps_existing_parent():
    owner = Node("owner")
    other = Node("other")
    child = owner.add_child(Node("child"))
    other.add_child(child)
    assert child.parent is owner
    assert other.children == [child]