"""Server-rendered dashboard and transaction history pages."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from walletview.core.config import get_settings
from walletview.core.exceptions import InvalidTransactionError
from walletview.interfaces.http.deps import get_current_user_id, get_db_session
from walletview.interfaces.http.templating import templates
from walletview.modules.dashboard import DashboardService
from walletview.modules.transactions import TransactionService
from walletview.presentation import (
    build_balance_view,
    build_feed_summary,
    build_rows,
    first_name,
    format_long_date,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _unavailable(request: Request, page: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "unavailable.html",
        {"page": page},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@router.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    return RedirectResponse(url="/dashboard", status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    user_id: Optional[int] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    display = get_settings().display
    service = DashboardService.with_session(db, default_provider=display.default_provider)
    try:
        summary = await service.get_summary(user_id, recent_limit=display.recent_activity_limit)
    except (SQLAlchemyError, InvalidTransactionError):
        logger.exception("Failed to load dashboard for user %s", user_id)
        return _unavailable(request, "dashboard")

    now = datetime.now(timezone.utc)
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "greeting_name": first_name(summary.user_name),
            "today": format_long_date(now, tz=display.timezone, locale=display.locale),
            "balance": build_balance_view(summary.balance, display),
            "activity": build_rows(summary.recent_activity, display, now=now),
        },
    )


@router.get("/transactions", response_class=HTMLResponse)
async def transactions_page(
    request: Request,
    user_id: Optional[int] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    display = get_settings().display
    service = TransactionService.with_session(db, default_provider=display.default_provider)
    try:
        feed = await service.get_feed(user_id)
    except (SQLAlchemyError, InvalidTransactionError):
        logger.exception("Failed to load transactions for user %s", user_id)
        return _unavailable(request, "transactions")

    return templates.TemplateResponse(
        request,
        "transactions.html",
        {
            "summary": build_feed_summary(feed, display),
            "rows": build_rows(feed, display, now=datetime.now(timezone.utc)),
        },
    )
