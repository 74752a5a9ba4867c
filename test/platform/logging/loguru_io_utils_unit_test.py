"""
Unit tests for the loguru IO log helpers (masking, truncation)
"""

import pytest

from src.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


class TestMaskSensitive:
    @pytest.mark.unit
    def test_masks_email_local_part(self) -> None:
        assert mask_sensitive('alice@example.com') == 'a***@example.com'

    @pytest.mark.unit
    def test_masks_email_inside_repr(self) -> None:
        masked = mask_sensitive("HoldSeatsRequest(seat_count=3, customer_email='bob@x.io')")
        assert 'bob@' not in masked
        assert "b***@x.io" in masked

    @pytest.mark.unit
    def test_leaves_other_values_untouched(self) -> None:
        value = {'seat_count': 3}
        assert mask_sensitive(value) is value

    @pytest.mark.unit
    def test_sensitive_keyword(self) -> None:
        assert should_mask_keyword('customer_email', 'a@b.com') == '********'
        assert should_mask_keyword('seat_count', 3) == 3


class TestTruncateContent:
    @pytest.mark.unit
    def test_short_content_kept(self) -> None:
        assert truncate_content('short') == 'short'

    @pytest.mark.unit
    def test_long_content_truncated(self) -> None:
        content = 'x' * (MAX_CONTENT_LENGTH + 10)
        truncated = truncate_content(content)
        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')


class TestNormalizeArgsKwargs:
    @pytest.mark.unit
    def test_drops_unknown_kwargs(self) -> None:
        def target(a: int, *, b: int | None = None) -> tuple[int, int | None]:
            return a, b

        args, kwargs = normalize_args_kwargs(target, 1, 2, b=3, c=4)
        assert args == (1,)
        assert kwargs == {'b': 3}
