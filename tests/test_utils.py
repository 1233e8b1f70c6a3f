"""Tests for utility modules"""

from notemeta.lib.utils import compute_sha256, compute_entry_id


class TestHashing:
    def test_sha256_format(self):
        result = compute_sha256("test")
        assert result.startswith("sha256:")
        assert len(result) == 71  # "sha256:" + 64 hex chars

    def test_sha256_deterministic(self):
        assert compute_sha256("pizza") == compute_sha256("pizza")

    def test_sha256_different_inputs(self):
        assert compute_sha256("pizza") != compute_sha256("pasta")

    def test_entry_id_format(self):
        result = compute_entry_id("notes/pizza.md")
        assert len(result) == 12
        assert all(c in "0123456789abcdef" for c in result)

    def test_entry_id_deterministic(self):
        assert compute_entry_id("notes/pizza.md") == compute_entry_id("notes/pizza.md")

    def test_entry_id_different_paths(self):
        assert compute_entry_id("notes/pizza.md") != compute_entry_id("notes/pasta.md")
