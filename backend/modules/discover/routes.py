"""
Discover API endpoints.

Exposes the discovery feed engine to the swipe client:
daily quota status and consumption, candidate IDs, skips and the
expired-skip maintenance operation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user
from api.models.errors import StoreErrorResponse
from api.dependencies import (
    get_candidate_sourcer,
    get_exclusion_resolver,
    get_quota_ledger,
)
from shared.models import AuthenticatedUser
from modules.candidates.interfaces import ICandidateSourcer
from modules.exclusions.exceptions import ExclusionStoreError
from modules.exclusions.interfaces import IExclusionResolver
from modules.exclusions.models import PurgeResult, SkipResult
from modules.quota.interfaces import IQuotaLedger
from modules.quota.models import SwipeGrant, SwipeStatus

from .models import DEFAULT_DECK_LIMIT, MAX_DECK_LIMIT, SkipDramaRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/swipes/status", response_model=SwipeStatus)
async def get_daily_swipes_status(
    user: AuthenticatedUser = Depends(get_current_user),
    ledger: IQuotaLedger = Depends(get_quota_ledger),
) -> SwipeStatus:
    """
    Get today's swipe status for the current user.

    Read-only. Falls back to a permissive status if the ledger is down.
    """
    return await ledger.get_status(user.id)


@router.get("/dramas", response_model=list[int])
async def get_dramas(
    limit: int = Query(
        default=DEFAULT_DECK_LIMIT,
        ge=1,
        le=MAX_DECK_LIMIT,
        description="Maximum number of IDs to return",
    ),
    user: AuthenticatedUser = Depends(get_current_user),
    sourcer: ICandidateSourcer = Depends(get_candidate_sourcer),
) -> list[int]:
    """
    Get shuffled catalog IDs for the swipe deck.

    Titles in any of the user's lists and titles skipped in the last
    week are excluded.
    """
    return await sourcer.get_candidates(user.id, limit)


@router.post("/swipes", response_model=SwipeGrant)
async def increment_daily_swipes(
    user: AuthenticatedUser = Depends(get_current_user),
    ledger: IQuotaLedger = Depends(get_quota_ledger),
) -> SwipeGrant:
    """
    Consume one swipe from today's allowance.

    Returns ``success=false`` (HTTP 200) when the daily limit is reached.
    """
    return await ledger.check_and_consume(user.id)


@router.post(
    "/skips",
    response_model=SkipResult,
    responses={502: {"model": StoreErrorResponse, "description": "Skip store unavailable"}},
)
async def skip_drama(
    request: SkipDramaRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    exclusions: IExclusionResolver = Depends(get_exclusion_resolver),
) -> SkipResult:
    """
    Hide a title from the user's discovery feed for the skip window.

    Skipping the same title again refreshes the window.
    """
    try:
        await exclusions.record_skip(user.id, request.drama_id)
    except ExclusionStoreError as e:
        logger.error(f"Error skipping drama {request.drama_id}: {e.message}")
        raise HTTPException(status_code=502, detail=e.to_dict())
    return SkipResult(success=True)


@router.post(
    "/skips/clean-expired",
    response_model=PurgeResult,
    responses={502: {"model": StoreErrorResponse, "description": "Skip store unavailable"}},
)
async def clean_expired_skipped_dramas(
    user: AuthenticatedUser = Depends(get_current_user),
    exclusions: IExclusionResolver = Depends(get_exclusion_resolver),
) -> PurgeResult:
    """
    Delete skip entries whose window has ended.

    Administrative maintenance; discovery results do not depend on it.
    """
    try:
        deleted = await exclusions.purge_expired()
    except ExclusionStoreError as e:
        logger.error(f"Error cleaning expired skipped dramas: {e.message}")
        raise HTTPException(status_code=502, detail=e.to_dict())
    return PurgeResult(deleted_count=deleted)
