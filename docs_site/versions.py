"""Decide whether a path segment names a documentation version.

Example
-------
>>> from docs_site.versions import VersionResolver
>>> resolver = VersionResolver({"3.0": "3.0", "2.2": "2.2"}, default_version="3.0")
>>> resolver.is_known("2.2"), resolver.is_known("local"), resolver.is_known("cheatsheet")
(True, True, False)
>>> resolver.versioned_path("/cheatsheet")
'/3.0/cheatsheet'
"""

from __future__ import annotations

import typing as typ

from docs_site._constants import LOCAL_VERSION


class VersionResolver:
    """Look up version tokens against the versions a content store reports.

    The lookup is the inverted versions mapping (label -> key) together with
    the keys themselves, plus ``local``, which is always valid for local
    development builds even when the content store does not advertise it.
    Matching is exact and case-sensitive.
    """

    def __init__(
        self, versions: typ.Mapping[str, str], *, default_version: str
    ) -> None:
        lookup = {label: key for key, label in versions.items()}
        lookup.update({key: key for key in versions})
        lookup[LOCAL_VERSION] = LOCAL_VERSION
        self._lookup = lookup
        self.default_version = default_version

    def is_known(self, segment: str | None) -> bool:
        """Return True when ``segment`` is a recognized version token."""
        if not segment:
            return False
        return segment in self._lookup

    def versioned_path(self, request_uri: str) -> str:
        """Prefix ``request_uri`` with the default version."""
        return f"/{self.default_version}{request_uri}"


__all__ = ["VersionResolver"]
