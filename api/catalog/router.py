"""
Public catalog endpoints: cars, testimonials, gallery.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from core.db import Database, get_db

from . import repository

router = APIRouter(prefix="/api")


@router.get("/cars")
async def list_cars(db: Database = Depends(get_db)) -> dict:
    return {"cars": await repository.list_active_cars(db)}


@router.get("/cars/featured/special")
async def get_featured_car(db: Database = Depends(get_db)) -> dict:
    """
    The active featured car, or `{"car": null}` when none is flagged.
    """
    return {"car": await repository.get_featured_car(db)}


@router.get("/cars/{car_id}")
async def get_car(car_id: int, db: Database = Depends(get_db)) -> dict:
    car = await repository.get_active_car(db, car_id)
    if car is None:
        raise HTTPException(status_code=404, detail="Car not found")
    return {"car": car}


@router.get("/testimonials")
async def list_testimonials(db: Database = Depends(get_db)) -> dict:
    return {"testimonials": await repository.list_active_testimonials(db)}


@router.get("/gallery")
async def list_gallery(db: Database = Depends(get_db)) -> dict:
    return {"images": await repository.list_active_gallery(db)}
