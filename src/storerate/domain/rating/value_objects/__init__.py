from storerate.domain.rating.value_objects.rating_score import RatingScore
from storerate.domain.rating.value_objects.rating_statistics import RatingStatistics

__all__ = ["RatingScore", "RatingStatistics"]
