"""Tests for goldenlife/core/retry.py - Retry helper."""

import pytest
from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from goldenlife.core.retry import (
    DEFAULT_ATTEMPTS,
    DEFAULT_BASE_DELAY,
    backoff_delay,
    with_retry,
)


class TestBackoffDelay:
    def test_first_attempt_uses_base_delay(self):
        assert backoff_delay(0, base_delay=0.2) == 0.2

    def test_delay_doubles_per_attempt(self):
        assert backoff_delay(1, base_delay=0.2) == 0.4
        assert backoff_delay(2, base_delay=0.2) == 0.8

    def test_uses_default_base_delay(self):
        assert backoff_delay(0) == DEFAULT_BASE_DELAY

    @hypothesis_settings(max_examples=50)
    @given(
        attempt=st.integers(min_value=0, max_value=10),
        base_delay=st.floats(min_value=0.01, max_value=1.0),
    )
    def test_exponential_backoff_property(self, attempt, base_delay):
        """Property: delay = base_delay * 2^attempt."""
        delay = backoff_delay(attempt, base_delay)
        assert abs(delay - base_delay * (2**attempt)) < 1e-9


class TestWithRetry:
    @pytest.mark.asyncio
    async def test_returns_result_on_first_success(self):
        call_count = 0

        async def succeed():
            nonlocal call_count
            call_count += 1
            return "success"

        assert await with_retry(succeed) == "success"
        assert call_count == 1

    @pytest.mark.asyncio
    async def test_retries_on_failure_then_succeeds(self):
        call_count = 0

        async def fail_then_succeed():
            nonlocal call_count
            call_count += 1
            if call_count < 2:
                raise ValueError("temporary error")
            return "success"

        result = await with_retry(
            fail_then_succeed, attempts=3, exceptions=(ValueError,), base_delay=0.01
        )

        assert result == "success"
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_raises_last_error_after_all_attempts(self):
        call_count = 0

        async def always_fail():
            nonlocal call_count
            call_count += 1
            raise ValueError(f"error {call_count}")

        with pytest.raises(ValueError, match="error 3"):
            await with_retry(
                always_fail, attempts=3, exceptions=(ValueError,), base_delay=0.01
            )

        assert call_count == 3

    @pytest.mark.asyncio
    async def test_does_not_catch_unlisted_exceptions(self):
        call_count = 0

        async def raise_type_error():
            nonlocal call_count
            call_count += 1
            raise TypeError("not catchable")

        with pytest.raises(TypeError):
            await with_retry(
                raise_type_error, attempts=3, exceptions=(ValueError,), base_delay=0.01
            )

        assert call_count == 1

    @pytest.mark.asyncio
    async def test_single_attempt_never_retries(self):
        call_count = 0

        async def always_fail():
            nonlocal call_count
            call_count += 1
            raise ValueError("error")

        with pytest.raises(ValueError):
            await with_retry(always_fail, attempts=1, exceptions=(ValueError,))

        assert call_count == 1

    @pytest.mark.asyncio
    async def test_uses_default_attempts(self):
        call_count = 0

        async def always_fail():
            nonlocal call_count
            call_count += 1
            raise ValueError("error")

        with pytest.raises(ValueError):
            await with_retry(always_fail, exceptions=(ValueError,), base_delay=0.01)

        assert call_count == DEFAULT_ATTEMPTS

    @pytest.mark.asyncio
    async def test_rejects_zero_attempts(self):
        async def succeed():
            return "success"

        with pytest.raises(ValueError, match="attempts"):
            await with_retry(succeed, attempts=0)
