# topmark:header:start
#
#   project      : VCardScribe
#   file         : __main__.py
#   file_relpath : src/vcardscribe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running VCardScribe via ``python -m vcardscribe``.

Delegates to :func:`vcardscribe.cli.main.cli`, the same entry point as the
``vcardscribe`` console script.

Examples:
    Write the contacts of a TOML file as vCard 3.0::

        python -m vcardscribe write contacts.toml --vcard-version 3.0
"""

from __future__ import annotations

from vcardscribe.cli.main import cli

if __name__ == "__main__":
    cli()
