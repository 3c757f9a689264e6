"""Tests for relative locations."""
import pytest

from pathtree.core.path import Location, relative_path, resolve


class TestLocation:
    """Test suite for Location."""

    def test_parse_url(self):
        """Test parsing a full URL."""
        location = Location.parse("https://example.com:8080/a/b?x=1")

        assert location.scheme == "https"
        assert location.host == "example.com"
        assert location.port == 8080
        assert location.path == "/a/b"
        assert location.query == "x=1"

    def test_parse_plain_path(self):
        location = Location.parse("/a/b")

        assert location.identity == ("", "", None)
        assert location.query is None

    def test_str(self):
        assert str(Location.parse("https://example.com:8080/a?x=1")) == "https://example.com:8080/a?x=1"
        assert str(Location.parse("/a/b")) == "/a/b"

    def test_components_are_standardized(self):
        """Test components collapse dots and drop a trailing separator."""
        assert Location("/a/./b/../c/").components == ("/", "a", "c")


class TestRelativePath:
    """Test suite for relative_path."""

    def test_sibling_branch(self):
        result = relative_path("/a/x", "/a/b/c")

        assert result.path == "../../x"
        assert result.identity == ("", "", None)

    def test_same_location_is_empty(self):
        """Test a location relative to itself is empty."""
        result = relative_path("/a/b", "/a/b")

        assert result.path == ""
        assert result.components == ()

    def test_descendant(self):
        assert relative_path("/a/b/c", "/a").path == "b/c"

    def test_ancestor(self):
        assert relative_path("/a", "/a/b").path == ".."

    def test_keeps_query(self):
        result = relative_path("/a/x?q=1", "/a/b")

        assert result.path == "../x"
        assert result.query == "q=1"
        assert str(result) == "../x?q=1"

    def test_standardizes_inputs(self):
        assert relative_path("/a/./b/../x", "/a/b/").path == "../x"

    def test_different_identity_returns_target(self):
        """Test locations on different hosts are not related."""
        target = Location.parse("http://h1/a/b")

        assert relative_path(target, "http://h2/a") is target

    def test_same_identity_drops_identity(self):
        result = relative_path(
            "http://example.com:8080/a/b/c",
            "http://example.com:8080/a/d"
        )

        assert result.path == "../b/c"
        assert result.scheme == ""
        assert result.host == ""
        assert result.port is None

    @pytest.mark.parametrize("target, base", [
        ("/a/x", "/a/b/c"),
        ("/", "/a/b"),
        ("/a/b", "/"),
        ("/a/b/c/", "/a/b/c"),
        ("/p/q/r", "/x/y"),
        ("/a/b", "/a/b"),
    ])
    def test_round_trip(self, target, base):
        """Test resolving a relative path against its base gives the target."""
        rel = relative_path(target, base)

        assert resolve(rel, base).components == Location.parse(target).components


class TestResolve:
    """Test suite for resolve."""

    def test_keeps_base_identity(self):
        result = resolve("../x", "http://example.com/a/b")

        assert result.host == "example.com"
        assert result.path == "/a/x"

    def test_absolute_relative(self):
        assert resolve("/z", "/a/b").path == "/z"

    def test_empty_relative(self):
        assert resolve("", "/a/b/").path == "/a/b"

    def test_location_with_identity_returned(self):
        other = Location.parse("http://h1/a")

        assert resolve(other, "/a/b") is other
