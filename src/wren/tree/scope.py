"""Scope allocation policies.

A scope token names one component instance's styling namespace. The
resolver asks its policy for a token once per component instance and
threads it down the tree.

Two policies ship:

- ``ContentHashScope`` (default): token derived from the style text, so
  identical styles share a token and rebuilds are byte-for-byte stable.
- ``RandomScope``: fresh token per instance.

A policy is fixed for a whole resolver; mixing them inside one render
breaks reproducibility.
"""

import hashlib
import secrets
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from wren.config import SiteConfig
from wren.errors import ConfigurationError

# Prefix keeps tokens valid as CSS identifiers (no leading digit)
_PREFIX = "w"


@runtime_checkable
class ScopePolicy(Protocol):
    """Produces a scope token for one component instance."""

    def allocate(self, style: str | None) -> str: ...


@dataclass(frozen=True, slots=True)
class ContentHashScope:
    """Token = short BLAKE2s digest of the style text.

    Pure function of its input, safe to share across threads.
    Styleless components all hash the empty string.
    """

    length: int = 8

    def allocate(self, style: str | None) -> str:
        digest = hashlib.blake2s((style or "").encode("utf-8")).hexdigest()
        return _PREFIX + digest[: self.length]


@dataclass(frozen=True, slots=True)
class RandomScope:
    """Token = random hex, independent of the style."""

    length: int = 8

    def allocate(self, style: str | None) -> str:
        return _PREFIX + secrets.token_hex((self.length + 1) // 2)[: self.length]


_POLICIES: dict[str, type[ContentHashScope] | type[RandomScope]] = {
    "hash": ContentHashScope,
    "random": RandomScope,
}


def policy_from_config(config: SiteConfig) -> ScopePolicy:
    """Build the scope policy named by ``config.scope_policy``.

    Raises:
        ConfigurationError: On an unknown policy name or a length below 1.
    """
    cls = _POLICIES.get(config.scope_policy)
    if cls is None:
        known = ", ".join(sorted(_POLICIES))
        msg = f"Unknown scope policy {config.scope_policy!r} (expected one of: {known})"
        raise ConfigurationError(msg)
    if config.scope_length < 1:
        msg = f"scope_length must be at least 1, got {config.scope_length}"
        raise ConfigurationError(msg)
    return cls(length=config.scope_length)
