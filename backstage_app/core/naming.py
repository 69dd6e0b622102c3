"""Service Naming — slug and display-name derivation for catalog entries.

Invariants:
    - slugify_service_name lowercases the whole name and collapses each
      whitespace run into one hyphen; punctuation is kept as-is
    - display_name_from_id upper-cases only the first character
    - Both are pure and total (empty input returns empty/suffix-only output)
"""

import re

from backstage_app.core.domain_types import ServiceId

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify_service_name(name: str) -> ServiceId:
    """'Consistent Test Service' -> 'consistent-test-service'."""
    return ServiceId(_WHITESPACE_RUN.sub("-", name.lower()))


def display_name_from_id(service_id: str) -> str:
    """'test-service' -> 'Test-service Service'."""
    return f"{service_id[:1].upper()}{service_id[1:]} Service"
