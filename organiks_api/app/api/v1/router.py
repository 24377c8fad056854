"""
Top-level router for version 1 of the API.

This router aggregates the per-entity routers under a unified prefix.
When new record kinds are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import egg_prices, eggs, orders, poultry

router = APIRouter()

router.include_router(poultry.router, prefix="/poultry", tags=["poultry"])
router.include_router(eggs.router, prefix="/eggs", tags=["eggs"])
router.include_router(egg_prices.router, prefix="/egg-prices", tags=["egg prices"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
