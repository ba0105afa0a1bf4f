"""Tree-sitter queries for Go.

Extracts:
    - Declared identifiers for the naming pass
    - Interface type declarations (naming prefix, Strategy pattern)
    - `if x != nil` guards and panic() calls
    - Constructor and singleton-getter functions
    - Import paths and package-qualified calls
    - String literals
"""

# Capture names carry the naming axis: function, type or variable.
NAMING_QUERY = """
(function_declaration name: (identifier) @function.name)
(method_declaration name: (field_identifier) @function.name)
(type_spec name: (type_identifier) @type.name)
(var_spec name: (identifier) @variable.name)
(short_var_declaration left: (expression_list (identifier) @variable.name))
"""

INTERFACE_QUERY = """
(type_spec
    name: (type_identifier) @interface.name
    type: (interface_type)
) @interface
"""

ERROR_HANDLING_QUERY = """
(if_statement
    condition: (binary_expression
        left: (identifier) @nil_check.name
        operator: "!="
        right: (nil)
    )
) @nil_check

(call_expression
    function: (identifier) @panic.name
    (#eq? @panic.name "panic")
) @panic
"""

# function_declaration only occurs at package level in Go.
CONSTRUCTOR_QUERY = """
(function_declaration
    name: (identifier) @factory.name
    (#match? @factory.name "^New[A-Z]")
) @factory

(function_declaration
    name: (identifier) @singleton.name
    (#match? @singleton.name "Get(Instance|Config|DB)")
) @singleton
"""

IMPORT_QUERY = """
(import_spec path: (interpreted_string_literal) @import.path)
"""

PACKAGE_CALL_QUERY = """
(call_expression
    function: (selector_expression
        operand: (identifier) @call.package
        field: (field_identifier) @call.method
    )
) @call
"""

STRING_QUERY = """
(interpreted_string_literal) @string
(raw_string_literal) @string
"""


def get_all_queries() -> dict[str, str]:
    """Return all Go queries as a dict."""
    return {
        "naming": NAMING_QUERY,
        "interface": INTERFACE_QUERY,
        "error_handling": ERROR_HANDLING_QUERY,
        "constructor": CONSTRUCTOR_QUERY,
        "import": IMPORT_QUERY,
        "package_call": PACKAGE_CALL_QUERY,
        "string": STRING_QUERY,
    }
