"""Built-in page templates and writing them out for customisation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .config import DoxybookError
from .tables import create_base_table, create_member_table, create_non_member_table

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultTemplate:
    """Source of a built-in template and the templates it includes."""

    src: str
    dependencies: tuple[str, ...] = ()


def _include(name: str, trim: bool = False) -> str:
    return '{% include "' + name + '" ' + ("-%}" if trim else "%}")


_HEADER = "".join(
    (
        "---\n",
        '{% if exists("title") -%}\n',
        "title: {{title}}\n",
        '{% else if exists("name") -%}\n',
        "title: {{name}}\n",
        "{% endif -%}\n",
        '{% if exists("summary") -%}\n',
        "summary: {{summary}}\n",
        "{% endif -%}\n",
        _include("meta") + "\n",
        "---\n\n",
        '{% if exists("title") -%}\n',
        "# {{title}}\n",
        '{% else if exists("kind") and kind != "page" -%}\n',
        "# {{name}} {{title(kind)}} Reference\n",
        "{% endif %}\n",
    )
)

_BREADCRUMBS = (
    '{% if exists("moduleBreadcrumbs") -%}\n'
    "**Module:** {%- for module in moduleBreadcrumbs -%}\n"
    " **[{{module.title}}]({{module.url}})**"
    "{% if not loop.is_last %} **/** {% endif -%}\n"
    "{% endfor %}\n\n"
    "{% endif -%}"
)

_FOOTER = "-" * 31 + '\n\nUpdated on {{date("%F at %H:%M:%S %z")}}'

_PARAM_LISTS = (
    ("paramList", "Parameters"),
    ("returnsList", "Returns"),
    ("exceptionsList", "Exceptions"),
    ("templateParamsList", "Template Parameters"),
)

_ITEM_LISTS = (
    ("see", "See"),
    ("returns", "Return"),
    ("authors", "Author"),
    ("version", "Version"),
    ("since", "Since"),
    ("date", "Date"),
    ("note", "Note"),
    ("bugs", "Bug"),
    ("tests", "Test"),
    ("todos", "Todo"),
    ("warning", "Warning"),
    ("pre", "Precondition"),
    ("post", "Postcondition"),
    ("copyright", "Copyright"),
    ("invariant", "Invariant"),
    ("remark", "Remark"),
    ("attention", "Attention"),
    ("par", "Par"),
    ("rcs", "Rcs"),
)


def _param_list_block(key: str, label: str) -> str:
    return (
        '{% if exists("' + key + '") %}\n'
        "**" + label + "**: \n\n"
        "{% for param in " + key + " %}  * **{{param.name}}** {{param.text}}\n"
        "{% endfor %}\n"
        "{% endif -%}\n\n"
    )


def _item_list_block(key: str, label: str) -> str:
    return (
        '{% if exists("' + key + '") %}\n'
        "**" + label + "**: {% if length(" + key + ") == 1 %}{{first(" + key + ")}}{% else %}\n\n"
        "{% for item in " + key + " %}  * {{item}}\n"
        "{% endfor %}{% endif %}\n"
        "{% endif -%}\n\n"
    )


def _build_details() -> str:
    parts = ['{% if exists("brief") %}{{brief}}\n{% endif -%}\n\n']
    parts.extend(_param_list_block(key, label) for key, label in _PARAM_LISTS)
    parts.append(
        '{% if exists("deprecated") %}\n**Deprecated**: \n\n{{deprecated}}\n{% endif -%}\n\n'
    )
    parts.extend(_item_list_block(key, label) for key, label in _ITEM_LISTS)
    parts.append(
        '{% if exists("reimplements") %}\n'
        "**Reimplements**: [{{reimplements.fullname}}]({{reimplements.url}})\n\n"
        "{% endif -%}\n\n"
    )
    parts.append(
        '{% if exists("reimplementedBy") %}\n'
        "**Reimplemented by**: {% for impl in reimplementedBy %}"
        "[{{impl.fullname}}]({{impl.url}}){% if not loop.is_last %}, {% endif %}{% endfor %}\n\n"
        "{% endif -%}\n\n"
    )
    parts.append('{% if exists("details") %}\n{{details}}\n\n{% endif -%}\n\n')
    parts.append('{% if exists("inbody") %}\n{{inbody}}\n\n{% endif -%}')
    return "".join(parts)


_DEFVAL = '{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}{% endif -%}\n'

_TEMPLATE_PARAMS = (
    '{% if exists("templateParams") -%}\n'
    "template <{% for param in templateParams %}{{param.typePlain}} {{param.name}}"
    + _DEFVAL
    + "{% if not loop.is_last %},\n{% endif %}{% endfor %}>\n"
    "{% endif -%}\n"
)


def _flag(name: str, text: str, trim: bool = True) -> str:
    return "{% if " + name + " %}" + text + ("{% endif -%}\n" if trim else "{% endif %}\n")


def _code_block(condition: str, body: str, endif: str = "{% endif -%}") -> str:
    return "{% if " + condition + " -%}\n```cpp\n" + body + "```" + endif + "\n\n"


def _function_body() -> str:
    prefixes = "".join(
        _flag(name, name + " ") for name in ("static", "inline", "explicit", "virtual")
    )
    suffixes = (
        _flag("const", " const")
        + _flag("override", " override")
        + _flag("default", " =default")
        + _flag("deleted", " =delete")
        + _flag("pureVirtual", " =0", trim=False)
    )
    signature = (
        '{% if exists("typePlain") %}{{typePlain}} {% endif %}{{name}}'
        "{% if length(params) > 0 -%}\n(\n"
        "{% for param in params %}    {{param.typePlain}} {{param.name}}"
        + _DEFVAL
        + "{% if not loop.is_last %},{% endif %}\n{% endfor -%}\n"
        "){% else -%}\n(){% endif -%}\n"
    )
    return _TEMPLATE_PARAMS + "\n" + prefixes + "\n" + signature + "\n" + suffixes


_ENUM_BLOCK = (
    '{% if kind == "enum" -%}\n'
    "| Enumerator | Value | Description |\n"
    "| ---------- | ----- | ----------- |\n"
    "{% for enumvalue in enumvalues %}| {{enumvalue.name}} | "
    '{% if existsIn(enumvalue, "initializer") -%}\n'
    '{{replace(enumvalue.initializer, "= ", "")}}{% endif -%}\n'
    '| {% if existsIn(enumvalue, "brief") %}{{enumvalue.brief}}{% endif %} '
    '{% if existsIn(enumvalue, "details") %}{{enumvalue.details}}{% endif %} |\n'
    "{% endfor %}\n"
    "{% endif -%}\n\n"
)

_VARIABLE_BODY = (
    _flag("static", "static ")
    + '{% if exists("typePlain") %}{{typePlain}} {% endif -%}{{name}}'
    '{% if exists("initializer") %} {{initializer}}{% endif %};\n'
)

_FRIEND_BODY = (
    'friend {% if exists("typePlain") %}{{typePlain}} {% endif -%}\n'
    '{{name}}{% if exists("params") %}{% endif -%}\n'
    "{% if length(params) > 0 -%}\n(\n"
    "{% for param in params %}    {{param.typePlain}} {{param.name}}"
    + _DEFVAL
    + "{% if not loop.is_last %},\n{% endif %}\n{% endfor -%}\n"
    '){% else if typePlain != "class" -%}\n(){% endif %};\n'
)

_DEFINE_BODY = (
    '#define {{name}}{% if exists("params") -%}\n(\n'
    "{% for param in params %}    {{param.name}}"
    + _DEFVAL
    + "{% if not loop.is_last %},\n{% endif -%}\n{% endfor %}\n)\n"
    "{% else %} {% endif -%}\n"
    '{% if exists("initializer") %}{{initializer}}{% endif %}\n'
)


def _build_member_details() -> str:
    return "".join(
        (
            _code_block('kind in ["function", "slot", "signal", "event"]', _function_body()),
            _ENUM_BLOCK,
            _code_block('kind in ["variable", "property"]', _VARIABLE_BODY),
            _code_block('kind == "typedef"', "{{definition}};\n"),
            _code_block('kind == "using"', _TEMPLATE_PARAMS + "{{definition}};\n"),
            _code_block('kind == "friend"', _FRIEND_BODY),
            _code_block('kind == "define"', _DEFINE_BODY, endif="{% endif %}"),
            _include("details", trim=True),
        )
    )


def _details_section(key: str, heading: str, closer: str) -> str:
    return (
        '{% if exists("' + key + '") %}## ' + heading + "\n\n"
        "{% for child in " + key + " %}### {{child.kind}} {{child.name}}\n\n"
        '{{ render("member_details", child) }}\n'
        "{% endfor %}" + closer
    )


_NONCLASS_DETAIL_SECTIONS = (
    ("publicTypes", "Types Documentation"),
    ("publicFunctions", "Functions Documentation"),
    ("publicAttributes", "Attributes Documentation"),
    ("defines", "Macros Documentation"),
)

_CLASS_DETAIL_SECTIONS = (
    ("publicTypes", "Public Types Documentation"),
    ("protectedTypes", "Protected Types Documentation"),
    ("publicSlots", "Public Slots Documentation"),
    ("protectedSlots", "Protected Slots Documentation"),
    ("publicSignals", "Public Signals Documentation"),
    ("protectedSignals", "Protected Signals Documentation"),
    ("publicEvents", "Public Events Documentation"),
    ("protectedEvents", "Protected Events Documentation"),
    ("publicFunctions", "Public Functions Documentation"),
    ("protectedFunctions", "Protected Functions Documentation"),
    ("publicProperties", "Public Property Documentation"),
    ("protectedProperties", "Protected Property Documentation"),
    ("publicAttributes", "Public Attributes Documentation"),
    ("protectedAttributes", "Protected Attributes Documentation"),
    ("friends", "Friends"),
)


def _build_nonclass_details() -> str:
    return "\n".join(
        _details_section(key, heading, "{% endif %}")
        for key, heading in _NONCLASS_DETAIL_SECTIONS
    )


def _build_class_details() -> str:
    return "\n\n".join(
        _details_section(key, heading, "{% endif -%}")
        for key, heading in _CLASS_DETAIL_SECTIONS
    )


_INDEX_DEPTH = 8


def _build_index() -> str:
    parts = [
        "\n{% for child0 in children %}* **{{child0.kind}} [{{child0.title}}]({{child0.url}})** "
        '{% if existsIn(child0, "brief") %}<br>{{child0.brief}}{% endif %}'
    ]
    for depth in range(1, _INDEX_DEPTH):
        parent = f"child{depth - 1}"
        child = f"child{depth}"
        parts.append(
            '{% if existsIn(' + parent + ', "children") %}'
            "{% for " + child + " in " + parent + ".children %}\n"
            + " " * (4 * depth)
            + "* **{{" + child + ".kind}} [{{last(stripNamespace(" + child + ".title))}}]"
            "({{" + child + ".url}})** "
            '{% if existsIn(' + child + ', "brief") %}<br>{{' + child + ".brief}}{% endif %}"
        )
    parts.append("{% endfor %}{% endif %}" * (_INDEX_DEPTH - 1))
    parts.append("\n{% endfor %}\n")
    return "".join(parts)


_BRIEF_LINE = (
    '{% if exists("brief") %}{{brief}}{% endif %}'
    "{% if hasDetails %} [More...](#detailed-description){% endif %}\n\n"
)

_DETAILED_DESCRIPTION = (
    "{% if hasDetails %}## Detailed Description\n\n"
    + _include("details")
    + "{% endif -%}\n\n"
)


def _build_kind_nonclass() -> str:
    return (
        _include("header", trim=True) + "\n\n"
        + _include("breadcrumbs", trim=True) + "\n\n"
        + _BRIEF_LINE
        + _include("nonclass_members_tables", trim=True) + "\n\n"
        + _DETAILED_DESCRIPTION
        + _include("nonclass_members_details") + "\n\n"
        + _include("footer")
    )


def _build_kind_group() -> str:
    return (
        _include("header", trim=True) + "\n\n"
        + _include("breadcrumbs", trim=True) + "\n\n"
        + _BRIEF_LINE
        + _include("nonclass_members_tables", trim=True) + "\n\n"
        + _DETAILED_DESCRIPTION
        + _include("nonclass_members_details", trim=True) + "\n\n"
        + _include("footer", trim=True) + "\n"
    )


def _build_kind_file() -> str:
    return (
        _include("header", trim=True) + "\n\n"
        + _BRIEF_LINE
        + _include("nonclass_members_tables", trim=True) + "\n\n"
        + _DETAILED_DESCRIPTION
        + _include("nonclass_members_details", trim=True) + "\n\n"
        + '{% if exists("programlisting")%}## Source code\n\n'
        "```cpp\n{{programlisting}}\n```\n{% endif %}\n\n"
        + _include("footer") + "\n"
    )


def _relations(key: str, label: str) -> str:
    return (
        '{%- if exists("' + key + '") %}' + label + " {% for child in " + key + " %}"
        '{% if existsIn(child, "url") %}[{{child.name}}]({{child.url}})'
        "{% else %}{{child.name}}{% endif %}"
        "{% if not loop.is_last %}, {% endif %}{% endfor %}\n\n"
        "{% endif -%}\n"
    )


def _build_kind_class() -> str:
    declaration = (
        "{% if hasDetails %}## Detailed Description\n\n"
        '```cpp{% if exists("templateParams") %}\n'
        "template <{% for param in templateParams %}{{param.typePlain}} {{param.name}}"
        '{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}{% endif %}'
        "{% if not loop.is_last %},\n{% endif %}{% endfor %}>{% endif %}\n"
        '{% if kind == "interface" %}class{% else %}{{kind}}{% endif %} {{name}};\n'
        "```\n\n"
        + _include("details")
        + "{% endif -%}\n\n"
    )
    return (
        _include("header", trim=True) + "\n\n"
        + _include("breadcrumbs") + "\n\n"
        + _BRIEF_LINE
        + '{% if exists("includes") %}\n`#include {{includes}}`\n\n{% endif -%}\n\n'
        + _relations("baseClasses", "Inherits from")
        + _relations("derivedClasses", "Inherited by")
        + "\n{%- include \"class_members_tables\" -%}\n\n"
        + "{% if hasAdditionalMembers %}## Additional inherited members\n\n"
        + _include("class_members_inherited_tables") + "\n{% endif -%}\n\n"
        + declaration
        + _include("class_members_details", trim=True) + "\n\n"
        + _include("footer")
    )


def _simple_page(middle: str) -> str:
    return _include("header") + "\n\n" + middle + "\n\n" + _include("footer") + "\n"


_KIND_PAGE = _simple_page('{% if exists("details") %}{{details}}{% endif %}')
_INDEX_PAGE = _simple_page(_include("index"))

_PAGE_DEPS = ("header", "details", "footer")
_INDEX_DEPS = ("header", "index", "footer")

DEFAULT_TEMPLATES: dict[str, DefaultTemplate] = {
    "meta": DefaultTemplate(""),
    "header": DefaultTemplate(_HEADER, ("meta",)),
    "footer": DefaultTemplate(_FOOTER),
    "details": DefaultTemplate(_build_details()),
    "breadcrumbs": DefaultTemplate(_BREADCRUMBS),
    "member_details": DefaultTemplate(_build_member_details(), ("details",)),
    "class_members_tables": DefaultTemplate(create_member_table()),
    "class_members_inherited_tables": DefaultTemplate(create_base_table()),
    "class_members_details": DefaultTemplate(_build_class_details(), ("member_details",)),
    "nonclass_members_tables": DefaultTemplate(create_non_member_table()),
    "nonclass_members_details": DefaultTemplate(_build_nonclass_details(), ("member_details",)),
    "index": DefaultTemplate(_build_index()),
    "kind_nonclass": DefaultTemplate(
        _build_kind_nonclass(),
        ("header", "breadcrumbs", "nonclass_members_tables", "nonclass_members_details", "footer"),
    ),
    "kind_class": DefaultTemplate(
        _build_kind_class(),
        (
            "header",
            "breadcrumbs",
            "class_members_tables",
            "class_members_inherited_tables",
            "class_members_details",
            "footer",
        ),
    ),
    "kind_group": DefaultTemplate(
        _build_kind_group(),
        ("header", "breadcrumbs", "nonclass_members_tables", "nonclass_members_details", "footer"),
    ),
    "kind_file": DefaultTemplate(
        _build_kind_file(),
        ("header", "nonclass_members_tables", "nonclass_members_details", "footer"),
    ),
    "kind_page": DefaultTemplate(_KIND_PAGE, _PAGE_DEPS),
    "kind_example": DefaultTemplate(_KIND_PAGE, _PAGE_DEPS),
    "index_classes": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
    "index_namespaces": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
    "index_groups": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
    "index_files": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
    "index_pages": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
    "index_examples": DefaultTemplate(_INDEX_PAGE, _INDEX_DEPS),
}


def save_default_templates(path: str) -> None:
    """Write every built-in template into ``path`` as ``<name>.tmpl``."""
    for name, template in DEFAULT_TEMPLATES.items():
        tmpl_path = os.path.join(path, name + ".tmpl")
        log.info("Creating default template %s", tmpl_path)
        try:
            with open(tmpl_path, "w", encoding="utf-8") as file:
                file.write(template.src)
        except OSError as exc:
            raise DoxybookError(f"Failed to open file {tmpl_path} for writing") from exc