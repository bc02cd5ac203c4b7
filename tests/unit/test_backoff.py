"""
Unit tests for backoff policies.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bookshelf.pump import (
    ExponentialBackoffPolicy,
    LinearBackoffPolicy,
    create_backoff_policy,
)


@pytest.mark.unit
class TestExponentialBackoffPolicy:
    """Tests for ExponentialBackoffPolicy"""

    def test_first_attempts(self):
        policy = ExponentialBackoffPolicy(base_delay=0.1, max_delay=10.0)
        assert policy.get_delay(1) == pytest.approx(0.1)
        assert policy.get_delay(2) == pytest.approx(0.2)
        assert policy.get_delay(3) == pytest.approx(0.4)

    @pytest.mark.parametrize("attempt", [0, -1, -100])
    def test_non_positive_attempt_is_zero(self, attempt):
        assert ExponentialBackoffPolicy().get_delay(attempt) == 0

    def test_capped_at_max_delay(self):
        policy = ExponentialBackoffPolicy(base_delay=1.0, max_delay=1.5)
        assert policy.get_delay(2) == 1.5
        assert policy.get_delay(10_000) == 1.5

    def test_defaults(self):
        policy = ExponentialBackoffPolicy()
        assert policy.get_delay(1) == pytest.approx(0.05)
        assert policy.get_delay(100) == pytest.approx(2.0)

    def test_negative_parameters_rejected(self):
        with pytest.raises(ValueError):
            ExponentialBackoffPolicy(base_delay=-1)

    @given(st.integers(min_value=1, max_value=5000))
    def test_property_monotonic_and_bounded(self, attempt):
        policy = ExponentialBackoffPolicy(base_delay=0.01, max_delay=3.0)
        assert 0 < policy.get_delay(attempt) <= 3.0
        assert policy.get_delay(attempt) <= policy.get_delay(attempt + 1)


@pytest.mark.unit
class TestLinearBackoffPolicy:
    """Tests for LinearBackoffPolicy"""

    def test_grows_by_step(self):
        policy = LinearBackoffPolicy(step=0.05, max_delay=1.0)
        assert policy.get_delay(1) == pytest.approx(0.05)
        assert policy.get_delay(4) == pytest.approx(0.2)

    def test_capped_at_max_delay(self):
        assert LinearBackoffPolicy(step=0.5, max_delay=1.0).get_delay(5) == 1.0

    @pytest.mark.parametrize("attempt", [0, -3])
    def test_non_positive_attempt_is_zero(self, attempt):
        assert LinearBackoffPolicy().get_delay(attempt) == 0

    @given(st.integers(min_value=1, max_value=10_000))
    def test_property_monotonic_and_bounded(self, attempt):
        policy = LinearBackoffPolicy(step=0.01, max_delay=2.0)
        assert 0 < policy.get_delay(attempt) <= 2.0
        assert policy.get_delay(attempt) <= policy.get_delay(attempt + 1)


@pytest.mark.unit
class TestCreateBackoffPolicy:
    def test_known_kinds(self):
        assert isinstance(create_backoff_policy("exponential", 0.1, 1.0), ExponentialBackoffPolicy)
        assert isinstance(create_backoff_policy("Linear", 0.1, 1.0), LinearBackoffPolicy)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown backoff policy"):
            create_backoff_policy("fibonacci", 0.1, 1.0)
