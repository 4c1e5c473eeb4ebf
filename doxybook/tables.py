"""Builders for the member tables used by the default page templates."""

from __future__ import annotations

from typing import Callable

ALL_VISIBILITIES = ("public", "protected")

TableBuilder = Callable[[str, str, str, bool], str]

_ONE_COLUMN_HEAD = "\n| Name           |\n| -------------- |\n"
_TWO_COLUMN_HEAD = (
    "\n|                | Name           |\n| -------------- | -------------- |\n"
)
_BRIEF = '{% if existsIn(child, "brief") %}<br>{{child.brief}}{% endif %} |\n'
_TABLE_END = "{% endfor %}\n{% endif -%}\n"

_TEMPLATE_PARAMS = (
    '| {% if existsIn(child, "templateParams") -%}\n'
    "template <"
    "{% for param in child.templateParams -%}\n"
    "{{param.typePlain}} {{param.name}}"
    '{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}{% endif -%}\n'
    "{% if not loop.is_last %},{% endif -%}\n"
    "{% endfor %}\\> <br>{% endif -%}\n"
)


def title(text: str) -> str:
    """Return ``text`` with its first character in upper case."""
    return text[:1].upper() + text[1:]


def _for_line(key: str, inherited: bool, newline: bool = True) -> str:
    prefix = "base." if inherited else ""
    return "{% for child in " + prefix + key + (" -%}\n" if newline else " -%}")


def create_table_header(visibility: str, title: str, key: str, inherited: bool) -> str:
    """Open the conditional block and write the heading of one table."""
    if inherited:
        return (
            '{%- if existsIn(base, "' + key + '") -%}\n'
            "**" + title + " inherited from [{{base.name}}]({{base.url}})**\n"
        )
    return '{%- if exists("' + key + '") %}' + "## " + title + "\n"


def create_table_for_namespace_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of names with briefs, used for namespaces."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _ONE_COLUMN_HEAD
        + _for_line(key, inherited)
        + "| **[{{child.name}}]({{child.url}})** "
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_class_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of kinds and full names, used for classes."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + "| {{child.kind}} | "
        + "**[{{child.name}}]({{child.url}})** "
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_class_strip_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of kinds and names with the namespace stripped."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + "| {{child.kind}} | "
        + "**[{{last(stripNamespace(child.name))}}]({{child.url}})** "
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_type_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of types, listing enum values inline."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + _TEMPLATE_PARAMS
        + '{{child.kind}}{% if child.kind == "enum" and child.strong %} class{% endif %}'
        + '{% if existsIn(child, "type") %} {{child.type}} {% endif -%}'
        + "| **[{{child.name}}]({{child.url}})** "
        + '{% if child.kind == "enum" %}{ '
        + "{% for enumvalue in child.enumvalues -%}\n"
        + "{{enumvalue.name}}"
        + '{% if existsIn(enumvalue, "initializer") %} {{enumvalue.initializer}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif %}{% endfor -%}\n }"
        + "{% endif -%}\n"
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_attribute_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of attributes and properties with their types."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + '| {% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + " "
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_friend_like(title: str, key: str, inherited: bool) -> str:
    """Table of friend declarations."""
    if inherited:
        head = (
            '{% if existsIn(base, "' + key + '") %}'
            "**" + title + " inherited from [{{base.name}}]({{base.url}})**\n"
        )
    else:
        head = '{% if exists("' + key + '") %}' + "## " + title + "\n"
    return (
        head
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited, newline=False)
        + '| {% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + '{% if child.type != "class" and child.type != "struct" -%}\n'
        + "({% for param in child.params -%}\n"
        + "{{param.type}} {{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif -%}\n"
        + "{% endfor %})"
        + "{% if child.const %} const{% endif -%}\n"
        + "{% endif %} "
        + '{% if existsIn(child, "brief") %}<br>{{child.brief}}'
        + "{% endif %} |\n"
        + _TABLE_END
    )


def create_table_for_function_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of functions, slots, signals and events with their signatures."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + _TEMPLATE_PARAMS
        + "{% if child.virtual %}virtual {% endif -%}\n"
        + '{% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + "({% for param in child.params -%}\n"
        + "{{param.type}} {{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif -%}\n"
        + "{% endfor %})"
        + "{% if child.const %} const{% endif -%}\n"
        + "{% if child.override %} override{% endif -%}\n"
        + "{% if child.default %} =default{% endif -%}\n"
        + "{% if child.deleted %} =delete{% endif -%}\n"
        + "{% if child.pureVirtual %} =0{% endif -%}\n"
        + " "
        + _BRIEF
        + _TABLE_END
    )


def create_table_for_define_like(
    visibility: str, title: str, key: str, inherited: bool
) -> str:
    """Table of preprocessor macros."""
    return (
        create_table_header(visibility, title, key, inherited)
        + _TWO_COLUMN_HEAD
        + _for_line(key, inherited)
        + '| {% if existsIn(child, "type") %}{{child.type}}{% endif %} | '
        + "**[{{child.name}}]({{child.url}})**"
        + '{% if existsIn(child, "params") %}'
        + "({% for param in child.params %}"
        + "{{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif %}'
        + "{% if not loop.is_last %}, {% endif %}"
        + "{% endfor %}){% endif %} "
        + _BRIEF
        + _TABLE_END
    )


def create_for_visibilities(fn: TableBuilder, title: str, key: str, inherited: bool) -> str:
    """Build one table per visibility, public first."""
    return "".join(
        fn(
            visibility,
            _capitalize(visibility) + " " + title,
            visibility + _capitalize(key),
            inherited,
        )
        for visibility in ALL_VISIBILITIES
    )


_capitalize = title


def _member_tables(inherited: bool) -> str:
    parts = [
        create_for_visibilities(create_table_for_class_strip_like, "Classes", "classes", inherited),
        create_for_visibilities(create_table_for_type_like, "Types", "types", inherited),
        create_for_visibilities(create_table_for_function_like, "Slots", "slots", inherited),
        create_for_visibilities(create_table_for_function_like, "Signals", "signals", inherited),
        create_for_visibilities(create_table_for_function_like, "Events", "events", inherited),
        create_for_visibilities(create_table_for_function_like, "Functions", "functions", inherited),
        create_for_visibilities(create_table_for_attribute_like, "Properties", "properties", inherited),
        create_for_visibilities(create_table_for_attribute_like, "Attributes", "attributes", inherited),
        create_table_for_friend_like("Friends", "friends", inherited),
    ]
    return "".join(parts)


def create_base_table() -> str:
    """Tables of members inherited from every base class."""
    return "{% for base in baseClasses -%}\n" + _member_tables(True) + "{% endfor -%}"


def create_member_table() -> str:
    """Tables of the members of a class."""
    return _member_tables(False)


def _titled_table(key: str, heading: str) -> str:
    return (
        '{% if exists("' + key + '") %}## ' + heading + "\n"
        "\n"
        "| Name           |\n"
        "| -------------- |\n"
        "{% for child in " + key + " -%}\n"
        "| **[{{child.title}}]({{child.url}})** "
        '{% if existsIn(child, "brief") %}<br>{{child.brief}}{% endif %} |\n'
        "{%- endfor %}\n"
        "{% endif -%}"
    )


def create_non_member_table() -> str:
    """Tables for namespaces, groups, files and directories."""
    parts = [
        _titled_table("groups", "Modules") + "\n\n",
        _titled_table("dirs", "Directories") + "\n\n",
        _titled_table("files", "Files") + "\n\n",
        create_table_for_namespace_like("public", "Namespaces", "namespaces", False),
        create_table_for_class_like("public", "Classes", "publicClasses", False),
        create_table_for_type_like("public", "Types", "publicTypes", False),
        create_table_for_function_like("public", "Slots", "publicSlots", False),
        create_table_for_function_like("public", "Signals", "publicSignals", False),
        create_table_for_function_like("public", "Functions", "publicFunctions", False),
        create_table_for_attribute_like("public", "Attributes", "publicAttributes", False),
        create_table_for_define_like("public", "Defines", "defines", False),
    ]
    return "".join(parts)