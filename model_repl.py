#!/usr/bin/env python3
"""
Schema Model - Interactive REPL with Auto-completion

Browse a built Database: schemas, tables, enums, refs, tags and the
normalized buckets. Table and schema names are offered by TAB completion.
"""
import json
from typing import Any, Dict, Optional

from prompt_toolkit import prompt
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from config import HISTORY_FILE, JSON_INDENT
from model_structure import NORMALIZED_BUCKETS, Database

# ============================================================================
# Command Hierarchy
# ============================================================================

# Arena kinds accepted by GET
ELEMENT_KINDS = (
    "database", "schema", "table", "field", "index", "index_column",
    "enum", "enum_value", "ref", "endpoint", "tag", "table_group",
)


def build_commands(database: Database) -> Dict[str, Any]:
    """Nested completion dict; table and schema names come from the model."""
    schema_names = {s.name: None for s in database.schemas}
    table_names = {}
    for schema in database.schemas:
        for table in schema.tables:
            table_names[table.name] = None
            table_names[f"{schema.name}.{table.name}"] = None

    return {
        "SHOW": {
            "SCHEMAS": None,
            "TABLES": schema_names or None,
            "TABLE": table_names or None,
            "ENUMS": schema_names or None,
            "REFS": None,
            "TAGS": None,
            "GROUPS": None,
        },
        "EXPORT": None,
        "NORMALIZE": {bucket: None for bucket in NORMALIZED_BUCKETS},
        "GET": {kind: None for kind in ELEMENT_KINDS},
        "HELP": None,
        "EXIT": None,
    }


# ============================================================================
# Style Configuration
# ============================================================================

style = Style.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


def print_banner(database: Database):
    print(f"""
+===========================================================================+
|                   Schema Model - Interactive Inspector                    |
+===========================================================================+
  Database: {database.name or '<unnamed>'}   Schemas: {', '.join(s.name for s in database.schemas) or '-'}
  Press TAB after a keyword for completions, 'HELP' for commands, 'EXIT' to quit
""")


def print_help():
    print("""
Command Reference
=================
  SHOW SCHEMAS                 - Schemas with alias and note
  SHOW TABLES [schema]         - Tables (of one schema or all)
  SHOW TABLE [schema.]name     - Fields, indexes, tags and group of a table
  SHOW ENUMS [schema]          - Enums with values and bound fields
  SHOW REFS                    - References between endpoints
  SHOW TAGS                    - Tags and their tables
  SHOW GROUPS                  - Table groups
  EXPORT                       - Nested export as JSON
  NORMALIZE [bucket]           - Normalized model (or one bucket) as JSON
  GET kind id                  - One element by kind and id
  HELP
  EXIT
""")


# ============================================================================
# Command Execution
# ============================================================================

def _schemas(database: Database, schema_name: Optional[str]):
    if schema_name is None:
        return database.schemas
    schema = database.lookup_schema(schema_name)
    return [schema] if schema else []


def _find_table(database: Database, name: str):
    schema_name, _, table_name = name.rpartition(".")
    for schema in _schemas(database, schema_name or None):
        table = schema.find_table(table_name)
        if table:
            return table
    return None


def _field_line(field) -> str:
    type_name = field.type_name or "?"
    if field.type_schema_name:
        type_name = f"{field.type_schema_name}.{type_name}"
    markers = [m for m, on in (("pk", field.pk), ("unique", field.unique),
                               ("not null", field.not_null), ("increment", field.increment)) if on]
    line = f"    {field.name}: {type_name}"
    if markers:
        line += f" [{', '.join(markers)}]"
    if field.enum:
        line += f" -> enum {field.enum.schema.name}.{field.enum.name}"
    return line


def show(database: Database, args) -> None:
    if not args:
        print("  Usage: SHOW SCHEMAS|TABLES|TABLE|ENUMS|REFS|TAGS|GROUPS")
        return
    what, rest = args[0].upper(), args[1:]

    if what == "SCHEMAS":
        for schema in database.schemas:
            alias = f" (alias {schema.alias})" if schema.alias else ""
            note = f"  -- {schema.note}" if schema.note else ""
            print(f"  {schema.name}{alias}: {len(schema.tables)} table(s){note}")
    elif what == "TABLES":
        for schema in _schemas(database, rest[0] if rest else None):
            for table in schema.tables:
                print(f"  {schema.name}.{table.name} ({len(table.fields)} field(s))")
    elif what == "TABLE":
        table = _find_table(database, rest[0]) if rest else None
        if table is None:
            print(f"  [?] Unknown table: {' '.join(rest)}")
            return
        print(f"  {table.schema.name}.{table.name}" + (f" as {table.alias}" if table.alias else ""))
        for field in table.fields:
            print(_field_line(field))
        for index in table.indexes:
            print(f"    index {index.name or '-'}: ({', '.join(c.value for c in index.columns)})")
        if table.tags:
            print(f"    tags: {', '.join(t.name for t in table.tags)}")
        if table.group:
            print(f"    group: {table.group.name}")
    elif what == "ENUMS":
        for schema in _schemas(database, rest[0] if rest else None):
            for enum in schema.enums:
                values = ", ".join(v.name for v in enum.values)
                used_by = ", ".join(f"{f.table.name}.{f.name}" for f in enum.fields) or "-"
                print(f"  {schema.name}.{enum.name} [{values}] used by {used_by}")
    elif what == "REFS":
        for schema in database.schemas:
            for ref in schema.refs:
                left, right = ref.endpoints
                print(f"  {ref.name or '-'}: {left.table_name}({', '.join(f.name for f in left.fields)}) "
                      f"{left.relation or '?'}-{right.relation or '?'} "
                      f"{right.table_name}({', '.join(f.name for f in right.fields)})")
    elif what == "TAGS":
        for schema in database.schemas:
            for tag in schema.tags:
                print(f"  {schema.name}.{tag.name}: {', '.join(t.name for t in tag.tables) or '-'}")
    elif what == "GROUPS":
        for schema in database.schemas:
            for group in schema.table_groups:
                print(f"  {schema.name}.{group.name}: {', '.join(t.name for t in group.tables) or '-'}")
    else:
        print(f"  [?] Unknown SHOW target: {args[0]}")


def execute_command(database: Database, command: str) -> bool:
    """Execute one command; returns False when the REPL should stop."""
    parts = command.strip().split()
    if not parts:
        return True
    keyword, args = parts[0].upper(), parts[1:]

    if keyword == "EXIT":
        print("Goodbye!")
        return False
    elif keyword == "HELP":
        print_help()
    elif keyword == "SHOW":
        show(database, args)
    elif keyword == "EXPORT":
        print(json.dumps(database.export(), indent=JSON_INDENT))
    elif keyword == "NORMALIZE":
        model = database.normalize()
        if args:
            if args[0] not in model:
                print(f"  [?] Unknown bucket: {args[0]}. Buckets: {', '.join(NORMALIZED_BUCKETS)}")
                return True
            model = model[args[0]]
        print(json.dumps(model, indent=JSON_INDENT))
    elif keyword == "GET":
        if len(args) != 2 or not args[1].isdigit():
            print("  Usage: GET kind id")
            return True
        element = database.get_element(args[0], int(args[1]))
        if element is None:
            print(f"  [?] No {args[0]} with id {args[1]}")
        else:
            print(json.dumps(element.export(), indent=JSON_INDENT))
    else:
        print(f"  [?] Unknown command: {command.strip()}")
        print("  Type 'HELP' for commands or press TAB for suggestions")
    return True


def run_repl(database: Database):
    """Main REPL loop"""
    print_banner(database)

    completer = NestedCompleter.from_nested_dict(build_commands(database))
    history = FileHistory(str(HISTORY_FILE))

    while True:
        try:
            user_input = prompt(
                'MODEL> ',
                completer=completer,
                complete_while_typing=False,
                history=history,
                auto_suggest=AutoSuggestFromHistory(),
                style=style,
            )
            if not execute_command(database, user_input):
                break

        except KeyboardInterrupt:
            print("\n  Use 'EXIT' to quit")
        except EOFError:
            print("\nGoodbye!")
            break
