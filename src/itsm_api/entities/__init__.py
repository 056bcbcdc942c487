"""Domain entities for internal representation.

These are pure dataclasses and enums used by the access layer and the
handlers. They are NOT used for API contracts - use DTOs from the dto
package for that.
"""

from .caller_scope import CallerScope
from .period import StatisticsPeriod, TrendPeriod
from .permission import Permission

__all__ = ["CallerScope", "Permission", "StatisticsPeriod", "TrendPeriod"]
