"""Dashboard domain exports"""

from .models import DashboardSummary
from .service import DashboardService

__all__ = ["DashboardSummary", "DashboardService"]
