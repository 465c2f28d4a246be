"""Built-in rule sets registered under the un-prefixed built-in plugin."""

from __future__ import annotations

from speclint.rules.info import info_contact, info_license
from speclint.rules.servers import no_empty_enum_servers
from speclint.types import SpecVersion

BUILTIN_RULES = {
    SpecVersion.OAS2: {
        "info-license": info_license,
        "info-contact": info_contact,
    },
    SpecVersion.OAS3: {
        "info-license": info_license,
        "info-contact": info_contact,
        "no-empty-enum-servers": no_empty_enum_servers,
    },
}

BUILTIN_PREPROCESSORS = {
    SpecVersion.OAS2: {},
    SpecVersion.OAS3: {},
}

BUILTIN_DECORATORS = {
    SpecVersion.OAS2: {},
    SpecVersion.OAS3: {},
}

__all__ = ["BUILTIN_DECORATORS", "BUILTIN_PREPROCESSORS", "BUILTIN_RULES"]
