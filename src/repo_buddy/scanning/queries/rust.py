"""Tree-sitter queries for Rust.

Extracts:
    - Function, struct/enum and let-binding identifiers
    - Use declarations
    - Result/Option return types and panic! invocations
"""

NAMING_QUERY = """
(function_item name: (identifier) @function.name)
(struct_item name: (type_identifier) @type.name)
(enum_item name: (type_identifier) @type.name)
(let_declaration pattern: (identifier) @variable.name)
"""

IMPORT_QUERY = """
(use_declaration argument: (_) @import.path)
"""

# Return types are matched both bare (Result<T, E>) and path-qualified
# (io::Result<T>); the type name is filtered in the analyzer.
ERROR_HANDLING_QUERY = """
(function_item
    return_type: (generic_type type: (type_identifier) @return.type))

(function_item
    return_type: (generic_type
        type: (scoped_type_identifier name: (type_identifier) @return.type)))

(function_signature_item
    return_type: (generic_type type: (type_identifier) @return.type))

(function_signature_item
    return_type: (generic_type
        type: (scoped_type_identifier name: (type_identifier) @return.type)))

(macro_invocation
    macro: (identifier) @panic.name
    (#eq? @panic.name "panic")
) @panic
"""


def get_all_queries() -> dict[str, str]:
    """Return all Rust queries as a dict."""
    return {
        "naming": NAMING_QUERY,
        "import": IMPORT_QUERY,
        "error_handling": ERROR_HANDLING_QUERY,
    }
