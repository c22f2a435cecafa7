"""Ratings router for raters and store owners."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from storerate.application.commands import SubmitRatingCommand, UpdateRatingCommand
from storerate.application.queries import ListStoreRatingsQuery, ListUserRatingsQuery
from storerate.presentation.api.dependencies import (
    RaterUser,
    RepoFactory,
    StoreOwnerUser,
)
from storerate.presentation.api.schemas.ratings import (
    MyRatingResponse,
    MyRatingsResponse,
    RatingEnvelope,
    RatingResponse,
    StoreRatingsResponse,
    SubmitRatingRequest,
    UpdateRatingRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Rate a store",
    responses={
        201: {"description": "Rating submitted successfully"},
        400: {"description": "Invalid rating or store already rated"},
        403: {"description": "Only users can rate stores"},
        404: {"description": "Store not found"},
    },
)
async def submit_rating(
    request: SubmitRatingRequest,
    rater: RaterUser,
    factory: RepoFactory,
) -> RatingEnvelope:
    command = SubmitRatingCommand.from_factory(factory)
    try:
        rating = await command.execute(
            user_id=rater.user_id,
            store_id=request.store_id,
            score=request.rating,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info(
        "User %s rated store %s with %d",
        rater.user_id,
        rating.store_id,
        rating.score,
    )
    return RatingEnvelope(
        message="Rating submitted successfully",
        rating=RatingResponse.from_domain(rating),
    )


# Declared before the parameterized routes below
@router.get(
    "/my-ratings",
    summary="List the caller's ratings",
    responses={
        200: {"description": "The caller's ratings, newest first"},
        403: {"description": "Only users have ratings"},
    },
)
async def list_my_ratings(rater: RaterUser, factory: RepoFactory) -> MyRatingsResponse:
    query = ListUserRatingsQuery.from_factory(factory)
    items = await query.execute(rater.user_id)
    return MyRatingsResponse(ratings=[MyRatingResponse.from_dto(i) for i in items])


@router.get(
    "/store/{store_id}",
    summary="List ratings of the caller's store",
    responses={
        200: {"description": "Ratings with average and count"},
        403: {"description": "Not the owner of this store"},
        404: {"description": "Store not found"},
    },
)
async def list_store_ratings(
    store_id: UUID,
    owner: StoreOwnerUser,
    factory: RepoFactory,
) -> StoreRatingsResponse:
    query = ListStoreRatingsQuery.from_factory(factory)
    dto = await query.execute(store_id, requesting_owner_id=owner.user_id)
    return StoreRatingsResponse.from_dto(dto)


@router.put(
    "/{store_id}",
    summary="Update the caller's rating of a store",
    responses={
        200: {"description": "Rating updated successfully"},
        400: {"description": "Invalid rating"},
        403: {"description": "Only users can rate stores"},
        404: {"description": "Rating not found"},
    },
)
async def update_rating(
    store_id: UUID,
    request: UpdateRatingRequest,
    rater: RaterUser,
    factory: RepoFactory,
) -> RatingEnvelope:
    command = UpdateRatingCommand.from_factory(factory)
    try:
        rating = await command.execute(
            user_id=rater.user_id,
            store_id=store_id,
            score=request.rating,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info(
        "User %s updated rating of store %s to %d",
        rater.user_id,
        store_id,
        rating.score,
    )
    return RatingEnvelope(
        message="Rating updated successfully",
        rating=RatingResponse.from_domain(rating),
    )
