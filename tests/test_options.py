"""Tests for request options."""

import httpx

from kuro.options import apply_options, with_cookie, with_header


def make_request() -> httpx.Request:
    return httpx.Request("GET", "http://test/items", headers={"Content-Type": "application/json"})


class TestWithHeader:
    """Tests for with_header."""

    def test_adds_header(self):
        """Should add the header to the request."""
        request = make_request()
        with_header("X-Request-Id", "abc")(request)
        assert request.headers["X-Request-Id"] == "abc"

    def test_appends_instead_of_overwriting(self):
        """Two values for the same key should both be kept, in order."""
        request = make_request()
        apply_options(request, (with_header("X-Trace", "a"), with_header("X-Trace", "b")))
        assert request.headers.get_list("X-Trace") == ["a", "b"]

    def test_keeps_existing_headers(self):
        """Headers set before the option should survive."""
        request = make_request()
        with_header("Authorization", "Bearer t")(request)
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Host"] == "test"


class TestWithCookie:
    """Tests for with_cookie."""

    def test_sets_cookie(self):
        """Should set the Cookie header."""
        request = make_request()
        with_cookie("session", "s1")(request)
        assert request.headers["Cookie"] == "session=s1"

    def test_joins_cookies(self):
        """Further cookies should be joined with '; '."""
        request = make_request()
        apply_options(request, (with_cookie("session", "s1"), with_cookie("theme", "dark")))
        assert request.headers["Cookie"] == "session=s1; theme=dark"

    def test_value_cannot_inject_cookies(self):
        """Separators and quotes in the value should be dropped."""
        request = make_request()
        with_cookie("session", 's1; admin=true"')(request)
        assert request.headers["Cookie"] == 'session="s1 admin=true"'

    def test_value_control_characters_dropped(self):
        request = make_request()
        with_cookie("session", "s\x001\x7f\\")(request)
        assert request.headers["Cookie"] == "session=s1"

    def test_value_with_space_or_comma_quoted(self):
        """Values containing a space or comma should be quoted."""
        request = make_request()
        apply_options(request, (with_cookie("a", "x y"), with_cookie("b", "1,2")))
        assert request.headers["Cookie"] == 'a="x y"; b="1,2"'

    def test_name_line_breaks_replaced(self):
        request = make_request()
        with_cookie("se\r\nssion", "s1")(request)
        assert request.headers["Cookie"] == "se--ssion=s1"


class TestApplyOptions:
    """Tests for apply_options ordering."""

    def test_applies_in_order(self):
        """Options should run in the order given."""
        calls = []
        apply_options(
            make_request(),
            (lambda r: calls.append("first"), lambda r: calls.append("second")),
        )
        assert calls == ["first", "second"]

    def test_no_options(self):
        """No options should leave the request unchanged."""
        request = make_request()
        before = request.headers.multi_items()
        apply_options(request, ())
        assert request.headers.multi_items() == before
