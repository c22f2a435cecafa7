from storerate.domain.rating.aggregates.rating import Rating

__all__ = ["Rating"]
