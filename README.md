# doxybook

A library of building blocks for turning Doxygen XML output into
Markdown documentation. It holds:

- the generator's settings and their JSON persistence
- the enumerations of documented entities
- the default page templates
- a loader that builds a node tree from Doxygen's `index.xml`
- a generator that writes pages, index pages, JSON dumps, a
  `manifest.json` and summary files from that tree

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Configuration (`doxybook.config`)

Settings live in the `Config` dataclass. Every field has a default. In
JSON, the fields use camelCase keys, for example `baseUrl`, `fileExt`,
`useFolders`, `indexClassesName` and `filesFilter`. `output_dir` is the
one exception: it is never read from or written to a config file.

```python
from doxybook.config import Config, load_config, load_config_data, save_config

config = Config()
load_config("config.json", config)                 # update from a file
load_config_data('{"useFolders": false}', config)  # or from a string
save_config(config, "config-default.json")         # write every setting out
```

Keys that are missing from the JSON keep their current values. Unknown
keys are ignored. `Config.to_dict()` and `Config.update_from_dict(data)`
do the same conversion without any files.

`DoxybookError` is raised in these cases:

- a file cannot be opened
- the JSON is invalid
- a value has the wrong type: booleans must be booleans, strings must be
  strings, and lists must be lists of strings

## Enumerations (`doxybook.enums`)

The enums are `Kind`, `Type`, `Virtual`, `Visibility` and
`FolderCategory`. The functions `parse_kind`, `parse_type`,
`parse_virtual`, `parse_visibility` and `parse_folder_category` turn
Doxygen's strings into these enums. `to_str` goes the other way.

```python
from doxybook.enums import Kind, parse_kind, to_str, kind_to_type

parse_kind("group")        # Kind.MODULE
to_str(Kind.MODULE)        # "group"
kind_to_type(Kind.STRUCT)  # Type.CLASSES
```

These predicates classify a `Kind`:

- `is_kind_structured`
- `is_kind_language`
- `is_kind_file`

These helpers take a `Config` and return a folder name, index name,
template name or title:

- `folder_category_to_folder_name`
- `type_to_folder_name`
- `type_to_index_name`
- `type_to_index_template`
- `type_to_index_title`

The two folder-name functions return an empty string when `use_folders`
is off.

## Default templates (`doxybook.default_templates`, `doxybook.tables`)

`DEFAULT_TEMPLATES` maps template names to `DefaultTemplate` values.
Each value holds `src`, the template text, and `dependencies`, the
templates it includes. The names include `header`, `footer`, `details`,
`member_details`, `kind_class`, `kind_file`, `index` and `index_classes`.

`save_default_templates(path)` writes every template into an existing
directory as `<name>.tmpl`.

`doxybook.tables` holds the functions that build the member-table parts
of those templates. Examples are `create_member_table`,
`create_base_table` and `create_non_member_table`.

## Loading Doxygen output (`doxybook.doxygen`)

```python
from doxybook.config import Config
from doxybook.doxygen import Doxygen

doxygen = Doxygen(Config())
doxygen.load("path/to/doxygen/xml")
node = doxygen.find("classEngine_1_1Audio_1_1AudioBuffer")
```

`get_index_kinds(input_dir)` returns the `(kind, refid)` pairs listed in
`index.xml`.

`Doxygen.load` adds compounds to the tree in this order:

1. language entities
2. groups
3. directories and files
4. pages
5. examples

During loading:

- A compound that fails to load is logged as a warning and skipped.
- A page with refid `indexpage` is renamed to `main_page_name`.
- Afterwards, the children of every group get a `group` pointer to it.

`find` raises `DoxybookError` for an unknown refid.

By default each `Node` is built only from its `index.xml` entry: refid,
kind and name. The per-compound XML files are not read. To fill in more
detail, pass a callable as `Doxygen(config, parser=...)`. It is called
as `parser(cache, input_dir, refid, is_group)` and must return a `Node`.

## Generating output (`doxybook.generator`)

`Generator(config, doxygen, json_converter=None, renderer=None)` works
on a loaded tree. Filters are collections of `Kind` values.

Methods that need only the tree:

- `summary(input_file, output_file, sections)` copies a file. It
  replaces its `{{doxygen}}` marker with a nested Markdown list of links.
  There is one entry for each `SummarySection`.
- `manifest()` writes `manifest.json` into `config.output_dir`.
  `build_manifest(node)` returns the same data.

Methods that also need a converter object (`get_as_json`, `convert`):

- `write_json(filter_, skip)` writes `<refid>.json` into
  `config.output_dir`.
- `build_index(node, filter_, skip)` returns the index entries, sorted by
  name at each level.

Methods that need both a converter and a renderer object
(`render(name, path, data)`):

- `print_pages(filter_, skip)`
- `print_index(category, filter_, skip)`

When these objects are missing, `DoxybookError` is raised.
`kind_to_type_template_name` is not a method; the method is
`kind_to_template_name(kind)`, which returns the configured template
for a page kind. `should_include(node)` drops files whose extension is
not in `filesFilter`, when that list is set.

## What this package does not do

- There is no template engine. Nothing here turns the default templates
  into Markdown by itself: page and index rendering go through the
  renderer object you supply.
- There is no converter from nodes to template data.
- There is no parser for the per-compound Doxygen XML files.
- There is no command-line tool.
- Images are not copied.