"""Service layer exports."""

from . import (
	aggregation_service,
	department_service,
	leaderboard_service,
	normalizer_service,
	ranking_service,
	roster_cache,
)

__all__ = [
	"aggregation_service",
	"department_service",
	"leaderboard_service",
	"normalizer_service",
	"ranking_service",
	"roster_cache",
]
