# modelhelper

Building blocks for generating code from data models. The package turns
names into the casings that code wants, describes entities, columns and the
relations between them, reads entity descriptions and code and project
templates from YAML files, renders project files with Jinja2, and prints
results as plain-text tables and trees.

## Modules

- `modelhelper.casing`: split identifiers into words and rejoin them as
  snake, kebab, macro, train, dot, pascal, camel, title or sentence case;
  `plural_form` and `singular_form`; `abbreviate`; word and line counts.
- `modelhelper.slices`: `max_len` and a case-insensitive `contains` for
  lists of strings.
- `modelhelper.paths`: `find_base_dir_from_foldername` walks up from a path
  to the first directory holding a given folder.
- `modelhelper.funcmap`: dictionaries of the casing helpers (plus
  `increment`, and `datatype`, `datatypeN` and `nullable` lookups built from
  your own type maps) ready to hand to a template engine.
- `modelhelper.models`: the `Column`, `Relation` and `Entity` dataclasses.
- `modelhelper.file_entities`, `modelhelper.file_source`: entities described
  in YAML files, and `FileEntitySource`, which reads a directory of them.
- `modelhelper.connection`: `split_connection_string`,
  `build_connection_string`, `is_connection_type_valid` and
  `EntityNotFoundError`.
- `modelhelper.code_templates`: `CodeTemplateService` finds YAML code
  templates and lists, filters, loads and groups them.
- `modelhelper.project_templates`, `modelhelper.generator`: find project
  templates and render their source files against a name and version.
- `modelhelper.project`: locate, load and save a project configuration kept
  in a `.modelhelper` folder.
- `modelhelper.table`, `modelhelper.table_builder`,
  `modelhelper.column_renderer`, `modelhelper.entity_render`,
  `modelhelper.tree`: console output.
- `modelhelper.cipher`, `modelhelper.vault`: AES-CFB encryption and a small
  encrypted key/value store kept in a file.
- `modelhelper.prompt`: simple interactive questions on the terminal.

## Casing

```python
from modelhelper.casing import camel_case, kebab_case, pascal_case, snake_case, train_case

snake_case("ThisIsTheCase")      # "this_is_the_case"
kebab_case("this_is_the_case")   # "this-is-the-case"
pascal_case("this is the case")  # "ThisIsTheCase"
camel_case("this-is-the-case")   # "thisIsTheCase"
train_case("thisIsTheCase")      # "This_Is_The_Case"
```

Words are split on spaces, underscores and hyphens and then on changes of
case. Runs of capitals stay together, so `PascalAPIController` splits into
`Pascal`, `API` and `Controller`.

## Entities from YAML files

`FileEntitySource(directory)` reads every file directly in the directory as
one entity:

```yaml
name: Order
schema: dbo
description: Customer orders
rows: 120
columns:
  Id:
    id: 1
    type: int
    primary: true
    identity: true
  CustomerId:
    id: 2
    type: int
    references:
      table: Customer
      column: Id
```

`entity(name)` matches the name ignoring case and returns `None` when there
is no such entity; `entities()` returns them all, with parent and child
relations, counts and an alias worked out from the references. The pattern
and column arguments of `entities` and `entities_from_column` are accepted
but not applied.

## Templates

`CodeTemplateService(code_locations, database_locations, project_template_path)`
reads every `.yaml`/`.yml` file below its locations. Each file holds a
mapping with `name`, `description`, `language`, `type`, `key`, `model`,
`features` and `body`; a template is named after its path relative to its
location, lower case, with separators turned into dashes and the extension
dropped. `list(CodeTemplateListOptions(...))` filters by keys, languages,
types, features and models; `group(by, templates)` groups by `language`,
`key`, `model` or type.

`ProjectTemplateService(locations)` finds files ending in
`project-template.yaml` or `project-template.yml`, holding `name`,
`version`, `description`, `language` and `sources`. `ProjectGenerator`
renders every file under the template's sources with Jinja2, with the
casing helpers available as filters:

```python
from modelhelper.generator import ProjectTemplateModel, render_template

render_template("{{ name | kebab }}", ProjectTemplateModel(name="OrderService"))
# "order-service"
```

## Tables

```python
from modelhelper.table import Table

Table("Name", "Type").add_row("id", "int").add_row("name", "nvarchar (50)").print()
```

Columns are padded to the widest cell; rows with fewer cells than the header
are filled with blanks, and extra cells are dropped. `render_table` in
`modelhelper.table_builder` draws a separated table from anything with
`header()` and `rows()` methods, such as `ColumnTableRenderer` or the entity
renderers.

## Encrypted values

```python
from modelhelper.cipher import decrypt, encrypt
from modelhelper.vault import file

encoded = encrypt("secret", "hello")
assert decrypt("secret", encoded) == "hello"

store = file("secret", "values.vault")
store.set("greeting", "hello")
assert store.get("greeting") == "hello"
```

Asking the vault for a key it does not hold raises `KeyError`.

## What this package does not do

It does not connect to databases: entities come only from YAML files, and
the connection helpers only build and split connection strings. There is no
command-line program; the modules are meant to be used from your own code.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.