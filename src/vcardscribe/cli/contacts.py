# topmark:header:start
#
#   project      : VCardScribe
#   file         : contacts.py
#   file_relpath : src/vcardscribe/cli/contacts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read contact records from TOML documents.

The CLI takes its input as a TOML document holding an array of ``[[contact]]``
tables. Each key of a contact table maps to one property kind; properties are
added to the record in key order:

```toml
[[contact]]
fn = "John Doe"
note = ["Likes coffee", "Allergic to cats"]
kind = "individual"

[contact.n]
family = "Doe"
given = "John"
prefixes = ["Dr."]

[[contact.adr]]
types = ["home"]
street = "123 Main St."
locality = "Austin"
label = "123 Main St.\\nAustin TX"

[[contact.extra]]
name = "X-LUCKY-NUMBER"
value = "13"
group = "item1"
params = { TYPE = ["work", "pref"] }
```

Text-like keys (``fn``, ``note``, ``prodid``, ``kind``, ``member``) accept a
string, a list of strings, a table with a ``value`` (or ``uri``) key, or an
array of such tables. Every property table may carry ``group`` and a
``params`` table (name to string or list of strings). ``agent`` holds either
``{ url = "..." }`` or a complete nested contact table.

Values of the wrong type are reported with a logged warning and ignored;
structural problems (a contact that is not a table, an extension property
without a name) raise `ContactsFormatError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from vcardscribe.config.io.getters import get_string_list_value, get_string_value_or_none
from vcardscribe.config.io.guards import as_toml_table_list, is_any_list, is_toml_table
from vcardscribe.config.io.loaders import load_toml_dict
from vcardscribe.config.logging import get_logger
from vcardscribe.model.properties import (
    Address,
    Agent,
    FormattedName,
    Kind,
    Label,
    Member,
    Note,
    ProductId,
    RawProperty,
    StructuredName,
)
from vcardscribe.model.vcard import VCard

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from vcardscribe.config.io.types import TomlTable
    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.model.properties import VCardProperty

logger: ScribeLogger = get_logger(__name__)

CONTACT_TABLE: Final[str] = "contact"

_ADDRESS_FIELDS: Final[tuple[str, ...]] = (
    "po_box",
    "extended",
    "street",
    "locality",
    "region",
    "postal_code",
    "country",
    "label",
)


class ContactsFormatError(ValueError):
    """The contacts document does not have the expected structure."""


def _apply_common(prop: VCardProperty, tbl: TomlTable | None, section: str) -> VCardProperty:
    """Copy the ``group`` and ``params`` keys of ``tbl`` onto ``prop``."""
    if tbl is None:
        return prop
    prop.group = get_string_value_or_none(tbl, "group", section=section)
    params: Any = tbl.get("params")
    if params is None:
        return prop
    if not is_toml_table(params):
        logger.warning("Expected table in [%s].params, got %r", section, params)
        return prop
    for name, _ in params.items():
        for value in get_string_list_value(params, name, section=f"{section}.params"):
            prop.parameters.add(name, value)
    return prop


def _text_entries(
    raw: Any, section: str, value_key: str = "value"
) -> list[tuple[str, TomlTable | None]]:
    """Normalize a text-like key into ``(value, table-or-None)`` pairs."""
    items: list[Any] = raw if is_any_list(raw) else [raw]
    out: list[tuple[str, TomlTable | None]] = []
    for idx, item in enumerate(items):
        if isinstance(item, str):
            out.append((item, None))
        elif is_toml_table(item):
            where: str = f"{section}[{idx}]"
            value: str | None = get_string_value_or_none(item, value_key, section=where)
            if value is None:
                logger.warning("Missing '%s' in [%s][%d], entry ignored", value_key, section, idx)
                continue
            out.append((value, item))
        else:
            logger.warning("Ignoring unsupported entry in [%s]: %r", section, item)
    return out


def _tables(raw: Any, section: str) -> list[TomlTable]:
    """Normalize a table-or-array-of-tables key into a list of tables."""
    if is_toml_table(raw):
        return [raw]
    tables: list[TomlTable] = as_toml_table_list(raw)
    if not tables:
        logger.warning("Expected a table or array of tables in [%s], got %r", section, raw)
    return tables


def _structured_names(raw: Any, section: str) -> list[VCardProperty]:
    out: list[VCardProperty] = []
    for tbl in _tables(raw, section):
        prop = StructuredName(
            family=get_string_value_or_none(tbl, "family", section=section),
            given=get_string_value_or_none(tbl, "given", section=section),
            additional=get_string_list_value(tbl, "additional", section=section),
            prefixes=get_string_list_value(tbl, "prefixes", section=section),
            suffixes=get_string_list_value(tbl, "suffixes", section=section),
        )
        out.append(_apply_common(prop, tbl, section))
    return out


def _addresses(raw: Any, section: str) -> list[VCardProperty]:
    out: list[VCardProperty] = []
    for tbl in _tables(raw, section):
        fields: dict[str, str | None] = {
            name: get_string_value_or_none(tbl, name, section=section) for name in _ADDRESS_FIELDS
        }
        prop: Address = Address.with_types(
            *get_string_list_value(tbl, "types", section=section), **fields
        )
        out.append(_apply_common(prop, tbl, section))
    return out


def _labels(raw: Any, section: str) -> list[VCardProperty]:
    out: list[VCardProperty] = []
    for value, tbl in _text_entries(raw, section):
        types: list[str] = get_string_list_value(tbl, "types", section=section) if tbl else []
        out.append(_apply_common(Label.with_types(value, types), tbl, section))
    return out


def _agents(raw: Any, section: str) -> list[VCardProperty]:
    out: list[VCardProperty] = []
    for tbl in _tables(raw, section):
        url: str | None = get_string_value_or_none(tbl, "url", section=section)
        prop: Agent
        if url is not None:
            prop = Agent(url=url)
        else:
            prop = Agent(vcard=contact_from_table(tbl, section=section))
        out.append(_apply_common(prop, tbl, section))
    return out


def _extras(raw: Any, section: str) -> list[VCardProperty]:
    out: list[VCardProperty] = []
    for idx, tbl in enumerate(_tables(raw, section)):
        name: str | None = get_string_value_or_none(tbl, "name", section=section)
        if not name:
            raise ContactsFormatError(f"[{section}][{idx}] has no 'name'")
        value: str | None = get_string_value_or_none(tbl, "value", section=section)
        out.append(_apply_common(RawProperty(name=name, value=value), tbl, section))
    return out


def _text_builder(
    factory: Callable[[str], VCardProperty], value_key: str = "value"
) -> Callable[[Any, str], list[VCardProperty]]:
    def build(raw: Any, section: str) -> list[VCardProperty]:
        return [
            _apply_common(factory(value), tbl, section)
            for value, tbl in _text_entries(raw, section, value_key)
        ]

    return build


_BUILDERS: Final[dict[str, Callable[[Any, str], list[VCardProperty]]]] = {
    "n": _structured_names,
    "fn": _text_builder(FormattedName),
    "note": _text_builder(Note),
    "prodid": _text_builder(ProductId),
    "kind": _text_builder(Kind),
    "member": _text_builder(Member, value_key="uri"),
    "adr": _addresses,
    "label": _labels,
    "agent": _agents,
    "extra": _extras,
}


def contact_from_table(tbl: TomlTable, *, section: str = CONTACT_TABLE) -> VCard:
    """Build a record from one contact table.

    Args:
        tbl (TomlTable): The contact table.
        section (str): Location of the table, used in messages only.

    Returns:
        VCard: The record, with properties in key order.
    """
    vcard = VCard()
    for key, raw in tbl.items():
        builder: Callable[[Any, str], list[VCardProperty]] | None = _BUILDERS.get(key)
        if builder is None:
            if key not in ("url", "group", "params"):
                logger.warning("Unknown key in [%s]: %s", section, key)
            continue
        vcard.extend(builder(raw, f"{section}.{key}"))
    logger.trace("Contact from [%s]: %r", section, vcard)
    return vcard


def contacts_from_document(doc: TomlTable) -> list[VCard]:
    """Build the records of a contacts document.

    Raises:
        ContactsFormatError: If the document has no ``[[contact]]`` array or an
            entry is not a table.
    """
    raw: Any = doc.get(CONTACT_TABLE)
    if raw is None:
        raise ContactsFormatError(f"No [[{CONTACT_TABLE}]] tables found")
    if not is_any_list(raw):
        raise ContactsFormatError(f"'{CONTACT_TABLE}' must be an array of tables")
    vcards: list[VCard] = []
    for idx, item in enumerate(raw):
        if not is_toml_table(item):
            raise ContactsFormatError(f"[[{CONTACT_TABLE}]] entry {idx} is not a table")
        vcards.append(contact_from_table(item, section=f"{CONTACT_TABLE}[{idx}]"))
    logger.debug("Read %d contact(s)", len(vcards))
    return vcards


def load_contacts(path: Path) -> list[VCard]:
    """Load the records of a contacts TOML file.

    Raises:
        TomlLoadError: If the file cannot be read or parsed.
        ContactsFormatError: If the document structure is invalid.
    """
    return contacts_from_document(load_toml_dict(path))
