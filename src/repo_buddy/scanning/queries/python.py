"""Tree-sitter queries for Python.

Extracts:
    - Function, class and assignment-target identifiers
    - Imported module names (import x, from x import y)
    - String literals
"""

NAMING_QUERY = """
(function_definition name: (identifier) @function.name)
(class_definition name: (identifier) @type.name)
(assignment left: (identifier) @variable.name)
"""

# Relative imports (from . import x) carry no package name and are skipped.
IMPORT_QUERY = """
(import_statement name: (dotted_name) @import.module)
(import_statement name: (aliased_import name: (dotted_name) @import.module))
(import_from_statement module_name: (dotted_name) @import.module)
"""

STRING_QUERY = """
(string) @string
"""


def get_all_queries() -> dict[str, str]:
    """Return all Python queries as a dict."""
    return {
        "naming": NAMING_QUERY,
        "import": IMPORT_QUERY,
        "string": STRING_QUERY,
    }
