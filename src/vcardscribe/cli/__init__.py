# topmark:header:start
#
#   project      : VCardScribe
#   file         : __init__.py
#   file_relpath : src/vcardscribe/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for VCardScribe.

The entry point is `vcardscribe.cli.main.cli` (console script ``vcardscribe``).
"""
