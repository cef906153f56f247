"""MSVG - version constants.

Keep this module tiny and dependency-free. It is imported by settings
and the package root, and must not have side effects.
"""

APP_VERSION = "0.1.0"

# Namespace emitted in <svg xmlns="..."> unless the document overrides it.
DEFAULT_XMLNS = "http://www.w3.org/2000/svg"

# Layout defaults for render(). NOTE: changing them changes every rendered byte.
DEFAULT_INDENT = "  "
DEFAULT_NEWLINE = "\n"
