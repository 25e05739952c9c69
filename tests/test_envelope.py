"""Tests for response envelopes and pagination."""

import json

from clickup_mcp.output import envelope_text, fail, ok, page_info, paginate


class TestEnvelope:
    """Tests for ok/fail."""

    def test_string_passes_through(self):
        envelope = ok("Acme (Workspace ID: 1)")
        assert len(envelope) == 1
        assert envelope[0].type == "text"
        assert envelope_text(envelope) == "Acme (Workspace ID: 1)"

    def test_dict_is_indented_json(self):
        text = envelope_text(ok({"a": 1, "b": [1, 2]}))
        assert json.loads(text) == {"a": 1, "b": [1, 2]}
        assert "\n  " in text

    def test_fail_string(self):
        assert json.loads(envelope_text(fail("boom"))) == {"error": "boom"}

    def test_fail_exception(self):
        assert json.loads(envelope_text(fail(ValueError("bad input")))) == {"error": "bad input"}

    def test_fail_context(self):
        payload = json.loads(envelope_text(fail("boom", {"workspace": "work"})))
        assert payload == {"error": "boom", "workspace": "work"}

    def test_non_json_values_are_stringified(self):
        class Thing:
            def __str__(self):
                return "thing"

        assert json.loads(envelope_text(ok({"x": Thing()}))) == {"x": "thing"}


class TestPagination:
    """Tests for paginate/page_info."""

    def test_first_page(self):
        page, meta = paginate(list(range(10)), limit=4, offset=0)
        assert page == [0, 1, 2, 3]
        assert meta == {
            "total": 10,
            "offset": 0,
            "limit": 4,
            "returned": 4,
            "has_more": True,
            "next_offset": 4,
        }

    def test_last_page(self):
        page, meta = paginate(list(range(10)), limit=4, offset=8)
        assert page == [8, 9]
        assert meta["has_more"] is False
        assert meta["next_offset"] is None

    def test_negative_offset_clamped(self):
        page, meta = paginate([1, 2, 3], limit=2, offset=-5)
        assert page == [1, 2]
        assert meta["offset"] == 0

    def test_exact_fit(self):
        assert page_info(4, 4, 0, returned=4)["has_more"] is False

    def test_offset_past_end(self):
        page, meta = paginate([1, 2, 3], limit=2, offset=10)
        assert page == []
        assert meta["returned"] == 0
        assert meta["has_more"] is False
