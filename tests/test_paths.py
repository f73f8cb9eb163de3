# tests/test_paths.py
"""Tests for the search path registry."""

import logging
from pathlib import Path

import pytest

from assettrail.paths import PathsSnapshot, SearchPaths


@pytest.fixture
def trail():
    """Registry rooted at /app with two paths."""
    return SearchPaths("/app", ["/a", "/b"], [".js", ".css"])


class TestSearchPaths:
    """Test path ordering and copies."""

    def test_root_is_absolute(self):
        """Test relative roots are made absolute."""
        trail = SearchPaths(".")
        assert trail.root.is_absolute()

    def test_relative_paths_expanded_against_root(self):
        """Test relative paths are joined to root."""
        trail = SearchPaths("/app", ["assets/js"])
        assert trail.paths() == [Path("/app/assets/js")]

    def test_absolute_paths_kept(self, trail):
        """Test absolute paths are not rebased."""
        assert trail.paths() == [Path("/a"), Path("/b")]

    def test_append_path(self, trail):
        """Test append adds with lowest priority."""
        trail.append_path("/c")
        assert trail.paths()[-1] == Path("/c")
        assert len(trail) == 3

    def test_prepend_path(self, trail):
        """Test prepend adds with highest priority."""
        trail.prepend_path("/c")
        assert trail.paths()[0] == Path("/c")

    def test_clear_paths(self, trail):
        """Test clear empties the list."""
        trail.clear_paths()
        assert trail.paths() == []

    def test_duplicates_allowed(self, trail):
        """Test the same path can be added twice."""
        trail.append_path("/a")
        assert trail.paths() == [Path("/a"), Path("/b"), Path("/a")]

    def test_paths_returns_copy(self, trail):
        """Test mutating paths() result does not affect registry."""
        paths = trail.paths()
        paths.append(Path("/evil"))
        paths.clear()
        assert trail.paths() == [Path("/a"), Path("/b")]

    def test_extensions_returns_copy(self, trail):
        """Test mutating extensions() result does not affect registry."""
        extensions = trail.extensions()
        extensions.append(".coffee")
        assert trail.extensions() == [".js", ".css"]

    def test_extensions_normalized(self):
        """Test extensions get a leading dot and are de-duplicated."""
        trail = SearchPaths("/app", extensions=["js", ".css", ".js"])
        assert trail.extensions() == [".js", ".css"]


class TestVersioning:
    """Test version stamps and invalidation hooks."""

    def test_version_bumped_on_every_mutation(self, trail):
        """Test each mutation increments the version."""
        assert trail.version == 0
        trail.append_path("/c")
        trail.prepend_path("/d")
        trail.clear_paths()
        assert trail.version == 3

    def test_clear_on_empty_still_invalidates(self):
        """Test clearing an empty registry fires listeners."""
        trail = SearchPaths("/app")
        calls = []
        trail.add_listener(lambda: calls.append(trail.version))

        trail.clear_paths()

        assert calls == [1]

    def test_listener_called_before_mutation_visible(self, trail):
        """Test listeners run before the new path is added."""
        seen = []
        trail.add_listener(lambda: seen.append(trail.paths()))

        trail.append_path("/c")

        assert seen == [[Path("/a"), Path("/b")]]
        assert trail.paths()[-1] == Path("/c")

    def test_remove_listener(self, trail):
        """Test removed listeners are no longer called."""
        calls = []
        listener = lambda: calls.append(1)  # noqa: E731
        trail.add_listener(listener)

        assert trail.remove_listener(listener)
        assert not trail.remove_listener(listener)

        trail.append_path("/c")
        assert calls == []

    def test_failing_listener_does_not_raise(self, trail, caplog):
        """Test a failing listener is logged, not propagated."""
        def broken():
            raise RuntimeError("boom")

        trail.add_listener(broken)
        with caplog.at_level(logging.WARNING):
            trail.append_path("/c")

        assert trail.paths()[-1] == Path("/c")
        assert "boom" in caplog.text

    def test_snapshot(self, trail):
        """Test snapshot freezes state and detects staleness."""
        snapshot = trail.snapshot()
        assert isinstance(snapshot, PathsSnapshot)
        assert snapshot.paths() == [Path("/a"), Path("/b")]
        assert snapshot.extensions() == [".js", ".css"]
        assert not snapshot.is_stale(trail)

        trail.append_path("/c")

        assert snapshot.is_stale(trail)
        assert snapshot.paths() == [Path("/a"), Path("/b")]
