"""Tests for header and markup sanitizers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from contact_api.utils.sanitizers import (  # noqa: E402
    escape_markup,
    sanitize_header_field,
    to_display_html,
)


class TestSanitizeHeaderField:
    """Tests for sanitize_header_field."""

    @pytest.mark.parametrize(
        'value',
        [
            'Hello\r\nBcc: victim@example.com',
            'line one\nline two',
            'carriage\rreturn',
            '\r\n\r\nleading',
            'trailing\n',
        ],
    )
    def test_removes_cr_and_lf(self, value: str) -> None:
        result = sanitize_header_field(value)
        assert '\r' not in result
        assert '\n' not in result

    def test_collapses_break_runs_to_single_space(self) -> None:
        assert sanitize_header_field('a\r\n\r\nb') == 'a b'

    def test_trims_surrounding_whitespace(self) -> None:
        assert sanitize_header_field('  subject \n') == 'subject'

    def test_leaves_clean_value_untouched(self) -> None:
        assert sanitize_header_field('Plain subject') == 'Plain subject'


class TestEscapeMarkup:
    """Tests for escape_markup."""

    def test_escapes_all_special_characters(self) -> None:
        assert escape_markup('<a href="x">\'&\'</a>') == (
            '&lt;a href=&quot;x&quot;&gt;&#39;&amp;&#39;&lt;/a&gt;'
        )

    def test_script_tag_is_neutralized(self) -> None:
        result = escape_markup('before<script>alert(1)</script>after')
        assert '<script>' not in result
        assert '&lt;script&gt;' in result

    def test_ampersand_escaped_once(self) -> None:
        assert escape_markup('<') == '&lt;'
        assert escape_markup('&lt;') == '&amp;lt;'

    def test_empty_string(self) -> None:
        assert escape_markup('') == ''


class TestToDisplayHtml:
    """Tests for to_display_html."""

    def test_converts_newlines(self) -> None:
        assert to_display_html('a\nb') == 'a<br/>b'

    def test_converts_crlf_as_single_break(self) -> None:
        assert to_display_html('a\r\nb') == 'a<br/>b'

    def test_escapes_before_converting(self) -> None:
        assert to_display_html('<b>\n&') == '&lt;b&gt;<br/>&amp;'
