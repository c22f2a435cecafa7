"""Tests for RatingScore and RatingStatistics."""

from decimal import Decimal

import pytest

from storerate.domain.rating import InvalidRatingError, RatingScore, RatingStatistics
from storerate.domain.shared.exceptions import ErrorCode


class TestRatingScore:
    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_accepts_integers_in_range(self, value):
        assert RatingScore(value).value == value

    def test_integral_float_is_stored_as_int(self):
        score = RatingScore(4.0)

        assert score.value == 4
        assert isinstance(score.value, int)

    @pytest.mark.parametrize("value", [0, 6, -1, 100])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidRatingError) as exc_info:
            RatingScore(value)

        assert exc_info.value.message == "Rating must be between 1 and 5"
        assert exc_info.value.code == ErrorCode.INVALID_RATING

    @pytest.mark.parametrize("value", [True, False, "5", 4.5, None, [3]])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidRatingError):
            RatingScore(value)


class TestRatingStatistics:
    def test_empty_has_no_average(self):
        stats = RatingStatistics.empty()

        assert stats.total_ratings == 0
        assert stats.average is None
        assert stats.average_rating is None

    @pytest.mark.parametrize(
        ("scores", "expected"),
        [
            ([5], "5.0"),
            ([5, 3], "4.0"),
            ([1, 3], "2.0"),
            ([4, 5], "4.5"),
            ([1, 2, 2], "1.7"),
            ([5, 5, 4], "4.7"),
            ([1, 1, 2], "1.3"),
        ],
    )
    def test_average_with_one_decimal(self, scores, expected):
        assert RatingStatistics.from_scores(scores).average_rating == expected

    def test_rounds_half_up(self):
        # 0.25 would round to 0.2 with banker's rounding
        stats = RatingStatistics(total_ratings=4, score_sum=9)  # 2.25

        assert stats.average == Decimal("2.3")
        assert stats.average_rating == "2.3"

    def test_from_scores_counts(self):
        stats = RatingStatistics.from_scores([2, 4, 5])

        assert stats.total_ratings == 3
        assert stats.score_sum == 11
