# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/scribes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in scribes.

Every module in this package is imported by
`vcardscribe.scribes.registry.register_all_scribes`; scribe classes declare
themselves with the `builtin_scribe` decorator.
"""
