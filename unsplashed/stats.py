"""
Stats

https://unsplash.com/documentation#stats
"""

from unsplashed.models import StatsMonth
from unsplashed.models import StatsTotal
from unsplashed.service import Service


class StatsService(Service):
    def total(self) -> StatsTotal:
        """Counts for all of Unsplash."""

        return self._get(self.config.endpoint("stats", "total"), StatsTotal)

    def month(self) -> StatsMonth:
        """Overall Unsplash stats for the past 30 days."""

        return self._get(self.config.endpoint("stats", "month"), StatsMonth)
