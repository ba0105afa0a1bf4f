"""Tree-sitter queries for TypeScript and JavaScript.

Both dialects of tree-sitter-typescript (typescript and tsx) accept these.

Extracts:
    - Function, method, class and variable identifiers
    - Module specifiers from ES imports and CommonJS require() calls
"""

NAMING_QUERY = """
(function_declaration name: (identifier) @function.name)
(method_definition name: (property_identifier) @function.name)
(class_declaration name: (type_identifier) @type.name)
(variable_declarator name: (identifier) @variable.name)
"""

IMPORT_QUERY = """
(import_statement source: (string) @import.source)

(call_expression
    function: (identifier) @require.function
    arguments: (arguments (string) @import.source)
    (#eq? @require.function "require")
)
"""


def get_all_queries() -> dict[str, str]:
    """Return all TypeScript/JavaScript queries as a dict."""
    return {
        "naming": NAMING_QUERY,
        "import": IMPORT_QUERY,
    }
