"""ContextVar-based render configuration for mdhtml.

The renderer recognizes three options: the document title, whether to emit
the DOCTYPE line, and whether to emit the charset/viewport meta tags.

Configuration is an immutable RenderConfig. It can be passed to a renderer
directly, or set for the current context so every renderer created without
an explicit config picks it up.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Explicit config
    renderer = HtmlRenderer(RenderConfig(title="Notes"))

    # Config from an options mapping (camelCase keys are accepted)
    config = RenderConfig.from_dict({"title": "Notes", "includeDoctype": False})

    # Scoped default for everything rendered in the block
    with render_config_context(RenderConfig(include_metadata=False)):
        html = render(nodes)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any

DEFAULT_TITLE = "Markdown转换结果"

# Orchestrator-facing option names -> RenderConfig fields
_OPTION_ALIASES: dict[str, str] = {
    "title": "title",
    "includeDoctype": "include_doctype",
    "include_doctype": "include_doctype",
    "includeMetadata": "include_metadata",
    "include_metadata": "include_metadata",
}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        title: Text of the document <title> (escaped on output)
        include_doctype: Emit the ``<!DOCTYPE html>`` line
        include_metadata: Emit the charset and viewport meta tags

    """

    title: str = DEFAULT_TITLE
    include_doctype: bool = True
    include_metadata: bool = True

    @classmethod
    def from_dict(cls, options: Mapping[str, Any] | None) -> RenderConfig:
        """Create RenderConfig from an options mapping.

        Accepts both field names (``include_doctype``) and the camelCase
        names used by callers passing raw options (``includeDoctype``).
        Unknown keys are ignored. Keys set to ``None`` fall back to the
        default, and so does an empty title.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "title": "Notes",
            ...     "includeMetadata": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.include_metadata
            False
            >>> config.include_doctype
            True

        """
        return cls(**_normalize_options(options or {}))

    def merged(self, options: Mapping[str, Any]) -> RenderConfig:
        """Return a copy with the recognized ``options`` applied on top."""
        return replace(self, **_normalize_options(options))


def _normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map raw option keys to RenderConfig fields, dropping unset values."""
    values: dict[str, Any] = {}
    for key, value in options.items():
        name = _OPTION_ALIASES.get(key)
        if name is None or value is None:
            continue
        if name == "title":
            if value:
                values[name] = str(value)
        else:
            values[name] = bool(value)
    return values


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration of the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(include_doctype=False)):
        ...     html = render(parse("# Hello"))
        >>> # Previous config is active again here

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


__all__ = [
    "DEFAULT_TITLE",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
