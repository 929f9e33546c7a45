"""Thread safety tests for mdhtml.

parse() and render() are pure functions over immutable nodes and a frozen
config, so concurrent calls must not interfere. These tests use real
threads to catch shared-state bugs.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

from mdhtml import RenderConfig, parse, render, render_config_context


class TestConcurrentUse:
    """Concurrent parse/render calls."""

    def test_concurrent_parse(self) -> None:
        sources = [f"# Doc {i}\n\nText **{i}** and *{i}*" for i in range(40)]
        expected = [parse(source) for source in sources]

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(parse, source): i for i, source in enumerate(sources)}
            for future in as_completed(futures):
                assert future.result() == expected[futures[future]]

    def test_concurrent_render_with_different_configs(self) -> None:
        blocks = parse("# Shared\n\nbody")

        def render_titled(i: int) -> tuple[int, str]:
            return i, render(blocks, title=f"Title {i}", include_doctype=i % 2 == 0)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(render_titled, range(40)))

        for i, html in results:
            assert f"<title>Title {i}</title>" in html
            assert html.startswith("<!DOCTYPE html>") == (i % 2 == 0)

    def test_context_config_per_thread(self) -> None:
        blocks = parse("# A")

        def render_in_context(i: int) -> tuple[int, str]:
            with render_config_context(RenderConfig(title=f"Ctx {i}")):
                return i, render(blocks)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(render_in_context, range(40)))

        for i, html in results:
            assert f"<title>Ctx {i}</title>" in html
