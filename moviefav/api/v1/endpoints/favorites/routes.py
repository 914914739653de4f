"""Favorites API routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from moviefav.api.dependencies import get_current_identity, get_favorites_service
from moviefav.api.responses import ApiResponse
from moviefav.core.auth.entities import Identity
from moviefav.core.favorites.services import FavoritesService
from .schemas import (
    AddFavoriteRequest,
    FavoriteResponse,
    FavoritesCountResponse,
    FavoriteStatusResponse,
    RemovedFavoriteResponse,
)

router = APIRouter(
    prefix="/favorites",
    tags=["Favorites"],
    responses={
        401: {"model": ApiResponse, "description": "Authentication required"},
        403: {"model": ApiResponse, "description": "Invalid or expired token"},
    },
)


@router.get(
    "",
    response_model=ApiResponse[List[FavoriteResponse]],
    summary="List favorites",
    description="List the current user's favorites, most recently added first.",
)
async def list_favorites(
    identity: Identity = Depends(get_current_identity),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> ApiResponse[List[FavoriteResponse]]:
    """List favorites of the authenticated user."""
    favorites = await favorites_service.list(identity)
    return ApiResponse(
        success=True,
        message="Favorites retrieved successfully",
        data=[FavoriteResponse.model_validate(favorite) for favorite in favorites],
    )


@router.post(
    "",
    response_model=ApiResponse[FavoriteResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add favorite",
    description="Add a movie, with a snapshot of its metadata, to the current user's favorites.",
    responses={
        201: {"description": "Movie added to favorites"},
        400: {"model": ApiResponse, "description": "Missing or invalid movie information"},
        409: {"model": ApiResponse, "description": "Movie already in favorites"},
    },
)
async def add_favorite(
    request: AddFavoriteRequest,
    identity: Identity = Depends(get_current_identity),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> ApiResponse[FavoriteResponse]:
    """Add a movie to the authenticated user's favorites."""
    favorite = await favorites_service.add(
        identity,
        movie_id=request.movie_id,
        title=request.title,
        poster=request.poster,
        overview=request.overview,
        release_date=request.release_date,
        rating=request.rating,
    )
    return ApiResponse(
        success=True,
        message="Movie added to favorites successfully",
        data=FavoriteResponse.model_validate(favorite),
    )


@router.get(
    "/count",
    response_model=ApiResponse[FavoritesCountResponse],
    summary="Count favorites",
)
async def count_favorites(
    identity: Identity = Depends(get_current_identity),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> ApiResponse[FavoritesCountResponse]:
    count = await favorites_service.count(identity)
    return ApiResponse(
        success=True,
        message="Favorites count retrieved successfully",
        data=FavoritesCountResponse(count=count),
    )


@router.get(
    "/check/{movie_id}",
    response_model=ApiResponse[FavoriteStatusResponse],
    summary="Check favorite status",
    description="Report whether a movie is in the current user's favorites.",
)
async def check_favorite(
    movie_id: int,
    identity: Identity = Depends(get_current_identity),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> ApiResponse[FavoriteStatusResponse]:
    favorite_status = await favorites_service.check_status(identity, movie_id)
    return ApiResponse(
        success=True,
        message="Favorite status checked successfully",
        data=FavoriteStatusResponse.model_validate(favorite_status),
    )


@router.delete(
    "/{movie_id}",
    response_model=ApiResponse[RemovedFavoriteResponse],
    summary="Remove favorite",
    description="Remove a movie from the current user's favorites.",
    responses={
        404: {"model": ApiResponse, "description": "Movie not in favorites"},
    },
)
async def remove_favorite(
    movie_id: int,
    identity: Identity = Depends(get_current_identity),
    favorites_service: FavoritesService = Depends(get_favorites_service),
) -> ApiResponse[RemovedFavoriteResponse]:
    """Remove a movie from the authenticated user's favorites."""
    removed = await favorites_service.remove(identity, movie_id)
    return ApiResponse(
        success=True,
        message="Movie removed from favorites successfully",
        data=RemovedFavoriteResponse(movie_id=removed),
    )
