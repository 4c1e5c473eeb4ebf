import re

import pytest

from doxybook import tables


def _count(pattern, text):
    return len(re.findall(pattern, text))


def _balanced(text):
    ifs = _count(r"\{%-?\s*if\b", text)
    endifs = _count(r"\{%-?\s*endif\b", text)
    fors = _count(r"\{%-?\s*for\b", text)
    endfors = _count(r"\{%-?\s*endfor\b", text)
    return ifs == endifs and fors == endfors


def test_title_capitalises_first_letter():
    assert tables.title("public") == "Public"
    assert tables.title("classes") == "Classes"
    assert tables.title("") == ""


def test_title_keeps_rest_unchanged():
    assert tables.title("aBc") == "ABc"


def test_header_not_inherited():
    header = tables.create_table_header("public", "Public Classes", "publicClasses", False)
    assert header == '{%- if exists("publicClasses") %}## Public Classes\n'


def test_header_inherited_refers_to_base():
    header = tables.create_table_header("public", "Public Classes", "publicClasses", True)
    assert header.startswith('{%- if existsIn(base, "publicClasses") -%}\n')
    assert "inherited from [{{base.name}}]({{base.url}})" in header


@pytest.mark.parametrize("inherited", [False, True])
def test_builders_are_balanced(inherited):
    args = ("public", "Public Things", "publicThings", inherited)
    texts = [
        tables.create_table_for_namespace_like(*args),
        tables.create_table_for_class_like(*args),
        tables.create_table_for_class_strip_like(*args),
        tables.create_table_for_type_like(*args),
        tables.create_table_for_attribute_like(*args),
        tables.create_table_for_function_like(*args),
        tables.create_table_for_define_like(*args),
    ]
    for text in texts:
        assert _balanced(text)
        assert text.endswith("{% endfor %}\n{% endif -%}\n")


@pytest.mark.parametrize("inherited", [False, True])
def test_inherited_loops_over_base(inherited):
    args = ("public", "T", "publicThings", inherited)
    texts = [
        tables.create_table_for_namespace_like(*args),
        tables.create_table_for_class_like(*args),
        tables.create_table_for_class_strip_like(*args),
        tables.create_table_for_type_like(*args),
        tables.create_table_for_attribute_like(*args),
        tables.create_table_for_function_like(*args),
        tables.create_table_for_define_like(*args),
    ]
    expected = (
        "{% for child in base.publicThings -%}"
        if inherited
        else "{% for child in publicThings -%}"
    )
    for text in texts:
        assert expected in text
        assert ("base.publicThings" in text) is inherited


@pytest.mark.parametrize("inherited", [False, True])
def test_friend_table_is_balanced(inherited):
    text = tables.create_table_for_friend_like("Friends", "friends", inherited)
    assert _balanced(text)
    assert 'child.type != "class"' in text


def test_friend_table_headers():
    own = tables.create_table_for_friend_like("Friends", "friends", False)
    inherited = tables.create_table_for_friend_like("Friends", "friends", True)
    assert own.startswith('{% if exists("friends") %}## Friends\n')
    assert inherited.startswith('{% if existsIn(base, "friends") %}**Friends')
    assert "{% for child in base.friends -%}" in inherited


def test_strip_like_uses_strip_namespace():
    text = tables.create_table_for_class_strip_like("public", "T", "k", False)
    assert "{{last(stripNamespace(child.name))}}" in text


def test_type_like_lists_enum_values():
    text = tables.create_table_for_type_like("public", "T", "k", False)
    assert "{% for enumvalue in child.enumvalues -%}" in text
    assert "{% endfor %}\\> <br>{% endif -%}\n" in text


def test_function_like_has_qualifiers():
    text = tables.create_table_for_function_like("public", "T", "k", False)
    for fragment in (" const", " override", " =default", " =delete", " =0"):
        assert fragment in text


def test_create_for_visibilities_public_before_protected():
    calls = []

    def builder(visibility, title, key, inherited):
        calls.append((visibility, title, key, inherited))
        return visibility + ";"

    result = tables.create_for_visibilities(builder, "Classes", "classes", True)
    assert result == "public;protected;"
    assert calls == [
        ("public", "Public Classes", "publicClasses", True),
        ("protected", "Protected Classes", "protectedClasses", True),
    ]


def test_member_table_contains_all_sections():
    text = tables.create_member_table()
    assert _balanced(text)
    for key in ("classes", "types", "slots", "signals", "events", "functions",
                "properties", "attributes"):
        for visibility in tables.ALL_VISIBILITIES:
            name = visibility + tables.title(key)
            assert f'exists("{name}")' in text
    assert 'exists("friends")' in text
    assert "base." not in text


def test_member_sections_order():
    text = tables.create_member_table()
    positions = [text.index(f'exists("{k}")') for k in
                 ("publicClasses", "protectedClasses", "publicTypes",
                  "publicFunctions", "protectedAttributes", "friends")]
    assert positions == sorted(positions)


def test_base_table_wraps_in_loop():
    text = tables.create_base_table()
    assert text.startswith("{% for base in baseClasses -%}\n")
    assert text.endswith("{% endfor -%}")
    assert _balanced(text)
    assert "{% for child in base.publicFunctions -%}" in text


def test_non_member_table_sections():
    text = tables.create_non_member_table()
    assert _balanced(text)
    assert text.startswith('{% if exists("groups") %}## Modules\n')
    for key in ("dirs", "files", "namespaces", "publicClasses", "publicTypes",
                "publicSlots", "publicSignals", "publicFunctions",
                "publicAttributes", "defines"):
        assert f'exists("{key}")' in text
    assert "protected" not in text


def test_non_member_table_uses_child_title_for_files():
    text = tables.create_non_member_table()
    assert "{% for child in files -%}\n| **[{{child.title}}]({{child.url}})** " in text