# topmark:header:start
#
#   project      : VCardScribe
#   file         : agent.py
#   file_relpath : src/vcardscribe/scribes/builtins/agent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scribe for ``AGENT``, the nested-record property.

An agent either embeds a complete vCard or references one by URL. An embedded
record is rendered by the writer (same version and configuration, no
generator id) and then embedded according to the version:

* 2.1: the nested text follows ``AGENT:`` verbatim, on its own lines.
* 3.0: the whole nested text is escaped as a single value, including its
  line breaks, ``;`` and ``,``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vcardscribe.config.logging import get_logger
from vcardscribe.core.versions import VCardVersion
from vcardscribe.encoding.escaping import escape_value
from vcardscribe.model.parameters import ParamName, VCardParameters
from vcardscribe.model.properties import Agent
from vcardscribe.scribes.base import PropertyScribe, VerbatimText
from vcardscribe.scribes.registry import builtin_scribe

if TYPE_CHECKING:
    from vcardscribe.config.logging import ScribeLogger
    from vcardscribe.scribes.base import WriteContext

logger: ScribeLogger = get_logger(__name__)


@builtin_scribe
class AgentScribe(PropertyScribe[Agent]):
    property_class = Agent
    property_name = "AGENT"
    description = "Person acting on behalf of the contact (embedded vCard or URL)"

    def skip_reason(self, prop: Agent, version: VCardVersion, context: WriteContext) -> str | None:
        if prop.vcard is None and prop.url is None:
            return "AGENT has neither an embedded vCard nor a URL"
        return None

    def prepare_parameters(
        self, prop: Agent, version: VCardVersion, context: WriteContext
    ) -> VCardParameters:
        params: VCardParameters = prop.parameters.copy()
        if prop.vcard is None and prop.url is not None:
            params.put(ParamName.VALUE, "URL" if version is VCardVersion.V2_1 else "uri")
        return params

    def write_value(self, prop: Agent, version: VCardVersion, context: WriteContext) -> str:
        if prop.vcard is None:
            return prop.url or ""

        logger.debug("Rendering embedded vCard at depth %d", context.depth + 1)
        nested: str = context.render_nested(prop.vcard)
        if version is VCardVersion.V2_1:
            return VerbatimText(nested)
        return escape_value(nested, version, structured_component=True)
