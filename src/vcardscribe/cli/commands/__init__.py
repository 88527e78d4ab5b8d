# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the VCardScribe CLI (one module per command)."""
