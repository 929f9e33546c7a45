"""Tests for ContextVar-based render configuration.

Validates defaults, from_dict() option mapping, thread isolation and the
context manager.
"""

from threading import Thread

import pytest

from mdhtml import (
    HtmlRenderer,
    RenderConfig,
    get_render_config,
    render,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from mdhtml.config import DEFAULT_TITLE


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.title == DEFAULT_TITLE == "Markdown转换结果"
        assert config.include_doctype is True
        assert config.include_metadata is True

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.title = "changed"  # type: ignore[misc]

    def test_merged_returns_new_config(self) -> None:
        config = RenderConfig(title="A")
        merged = config.merged({"include_doctype": False})
        assert merged == RenderConfig(title="A", include_doctype=False)
        assert config.include_doctype is True


class TestRenderConfigFromDict:
    """Test RenderConfig.from_dict() factory method."""

    def test_snake_case_keys(self) -> None:
        config = RenderConfig.from_dict({"title": "T", "include_metadata": False})
        assert config == RenderConfig(title="T", include_metadata=False)

    def test_camel_case_keys(self) -> None:
        config = RenderConfig.from_dict({"includeDoctype": False, "includeMetadata": False})
        assert config.include_doctype is False
        assert config.include_metadata is False

    def test_unknown_keys_ignored(self) -> None:
        config = RenderConfig.from_dict({"title": "T", "unknown_key": 1, "lang": "en"})
        assert config == RenderConfig(title="T")

    def test_empty_and_none(self) -> None:
        assert RenderConfig.from_dict({}) == RenderConfig()
        assert RenderConfig.from_dict(None) == RenderConfig()

    def test_none_values_fall_back_to_defaults(self) -> None:
        config = RenderConfig.from_dict(
            {"title": None, "includeDoctype": None, "includeMetadata": None}
        )
        assert config == RenderConfig()

    def test_empty_title_falls_back_to_default(self) -> None:
        assert RenderConfig.from_dict({"title": ""}).title == DEFAULT_TITLE

    def test_flags_coerced_to_bool(self) -> None:
        config = RenderConfig.from_dict({"include_doctype": 0, "include_metadata": "yes"})
        assert config.include_doctype is False
        assert config.include_metadata is True


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_render_config()

    def test_default_config(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_get(self) -> None:
        set_render_config(RenderConfig(title="Ctx"))
        assert get_render_config().title == "Ctx"

    def test_reset(self) -> None:
        set_render_config(RenderConfig(title="Ctx"))
        reset_render_config()
        assert get_render_config() == RenderConfig()

    def test_renderer_reads_context_config(self) -> None:
        set_render_config(RenderConfig(include_doctype=False))
        assert "<!DOCTYPE" not in HtmlRenderer().render([])
        assert "<!DOCTYPE" not in render([])

    def test_explicit_config_wins_over_context(self) -> None:
        set_render_config(RenderConfig(include_doctype=False))
        assert "<!DOCTYPE" in HtmlRenderer(RenderConfig()).render([])


class TestContextManager:
    """Test render_config_context()."""

    def test_scoped_config(self) -> None:
        with render_config_context(RenderConfig(title="Scoped")):
            assert "<title>Scoped</title>" in render([])
        assert get_render_config() == RenderConfig()

    def test_nested_contexts_restore(self) -> None:
        with render_config_context(RenderConfig(title="Outer")):
            with render_config_context(RenderConfig(title="Inner")):
                assert get_render_config().title == "Inner"
            assert get_render_config().title == "Outer"

    def test_restored_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(title="Boom")):
                raise RuntimeError("boom")
        assert get_render_config() == RenderConfig()


class TestThreadIsolation:
    """Context config set in one thread is invisible to others."""

    def test_other_thread_sees_default(self) -> None:
        seen: list[RenderConfig] = []

        def worker() -> None:
            seen.append(get_render_config())

        with render_config_context(RenderConfig(title="Main thread")):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [RenderConfig()]
