"""Tests for element identity generation."""

import re

from timeline_tui.data.identity import ElementId, identity


class TestIdentity:
    """Tests for identity()."""

    def test_same_key_same_identity(self):
        assert identity("tool-1") == identity("tool-1")

    def test_different_keys_do_not_collide(self):
        keys = [f"item-{i}" for i in range(2000)] + ["", "user-1", "agent-1", "tool-1", "ünïcode"]
        ids = {identity(key) for key in keys}
        assert len(ids) == len(keys)

    def test_value_is_64_bit(self):
        value = identity("agent-1").value
        assert 0 <= value < 2**64

    def test_known_digest_is_stable(self):
        # Stable across processes, unlike the built-in hash().
        import hashlib

        expected = int.from_bytes(hashlib.blake2b(b"user-1", digest_size=8).digest(), "big")
        assert identity("user-1").value == expected

    def test_prefix(self):
        element_id = identity("x", prefix="tool")
        assert element_id.prefix == "tool"
        assert element_id.dom_id.startswith("tool-")
        assert identity("x", prefix="tool") != identity("x")


class TestElementId:
    """Tests for ElementId formatting."""

    def test_dom_id_is_textual_safe(self):
        dom_id = identity("some id with spaces/and:colons").dom_id
        assert re.fullmatch(r"[A-Za-z_][A-Za-z0-9_-]*", dom_id)

    def test_dom_id_zero_padded(self):
        assert ElementId(prefix="item", value=255).dom_id == "item-00000000000000ff"

    def test_str_is_dom_id(self):
        element_id = identity("agent-1")
        assert str(element_id) == element_id.dom_id
