# tests/test_fingerprint.py
"""Tests for fingerprint parsing and verification."""

from assettrail.fingerprint import fingerprint_path, parse, verify


class TestParse:
    """Test logical path parsing."""

    def test_fingerprinted_path(self):
        """Test fingerprint is extracted and stripped."""
        attributes = parse("app-deadbeef.js")
        assert attributes.path == "app.js"
        assert attributes.fingerprint == "deadbeef"
        assert attributes.logical_path == "app-deadbeef.js"

    def test_plain_path(self):
        """Test paths without a fingerprint are unchanged."""
        attributes = parse("app.js")
        assert attributes.path == "app.js"
        assert attributes.fingerprint is None

    def test_full_sha3_digest(self):
        """Test a 64 char digest is recognized."""
        digest = "0123456789abcdef" * 4
        attributes = parse(f"js/app-{digest}.js")
        assert attributes.path == "js/app.js"
        assert attributes.fingerprint == digest

    def test_short_suffix_not_fingerprint(self):
        """Test version-like suffixes are left alone."""
        assert parse("jquery-1.7.js").fingerprint is None
        assert parse("app-abc.js").fingerprint is None

    def test_uppercase_not_fingerprint(self):
        """Test only lowercase hex is a fingerprint."""
        assert parse("app-DEADBEEF.js").fingerprint is None

    def test_dashed_name(self):
        """Test names containing dashes keep them."""
        attributes = parse("my-lib-abcdef1.min.js")
        assert attributes.path == "my-lib.min.js"
        assert attributes.fingerprint == "abcdef1"

    def test_multiple_extensions(self):
        """Test all extensions are collected."""
        attributes = parse("app.js.coffee")
        assert attributes.extensions == [".js", ".coffee"]

    def test_search_paths_include_index(self):
        """Test index variant follows the plain path."""
        assert parse("lib.js").search_paths == ["lib.js", "lib/index.js"]
        assert parse("js/lib.js").search_paths == ["js/lib.js", "js/lib/index.js"]

    def test_search_paths_use_stripped_path(self):
        """Test variants are built from the stripped path."""
        assert parse("lib-deadbeef.js").search_paths == ["lib.js", "lib/index.js"]

    def test_index_has_no_index_variant(self):
        """Test index files are not nested further."""
        assert parse("lib/index.js").search_paths == ["lib/index.js"]

    def test_dotfile(self):
        """Test dotfiles parse without a stem."""
        attributes = parse(".htaccess")
        assert attributes.path == ".htaccess"
        assert attributes.fingerprint is None


class TestVerify:
    """Test fingerprint verification."""

    def test_no_fingerprint_always_ok(self):
        assert verify("anything", None)

    def test_match(self):
        assert verify("deadbeef", "deadbeef")

    def test_mismatch(self):
        """Test mismatch is reported, not raised."""
        assert not verify("cafebabe", "deadbeef")


class TestFingerprintPath:
    """Test digest insertion."""

    def test_inserts_before_extensions(self):
        assert fingerprint_path("js/app.js", "deadbeef") == "js/app-deadbeef.js"

    def test_parse_inverts(self):
        """Test parse strips what fingerprint_path adds."""
        attributes = parse(fingerprint_path("app.min.js", "abcdef12"))
        assert attributes.path == "app.min.js"
        assert attributes.fingerprint == "abcdef12"
