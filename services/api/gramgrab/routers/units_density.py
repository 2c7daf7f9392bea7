import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from redis import RedisError

from ..deps import get_density_resolver
from ..schemas import DensityOut, DensityUpsert, DensityUpsertResponse
from ..services.ingredient_density import CachedDensityResolver
from ..services.ingredient_normalize import normalize_ingredient_key
from ..services.unit_registry import UNIT_DEFINITIONS, UnitCategory, get_unit_definition

router = APIRouter()
logger = logging.getLogger("gramgrab.density")


@router.get("/densities/resolve", response_model=DensityOut)
def resolve_density(
    name: str = Query(..., min_length=1, max_length=200),
    resolver: CachedDensityResolver = Depends(get_density_resolver),
):
    info = resolver.resolve(name)
    return DensityOut(
        ingredient_key=normalize_ingredient_key(name),
        is_dry_convertible=info.is_dry_convertible,
        grams_per_cup=info.grams_per_cup,
        kind=info.kind,
        source=info.source,
    )


@router.put("/densities", response_model=DensityUpsertResponse)
def upsert_density(
    req: DensityUpsert,
    resolver: CachedDensityResolver = Depends(get_density_resolver),
):
    # 1. Normalize
    key = normalize_ingredient_key(req.ingredient_name)
    if not key:
        raise HTTPException(status_code=400, detail="Invalid ingredient name")

    # 2. Convert user input to g/ml
    # Input: grams (e.g. 120) per per_qty per_unit (e.g. 1 cup)
    definition = get_unit_definition(req.density.per_unit)
    if not definition:
        raise HTTPException(status_code=400, detail=f"Unknown unit: {req.density.per_unit}")
    if definition.category != UnitCategory.VOLUME:
        raise HTTPException(status_code=400, detail="Density denominator must be a volume unit (e.g. cup, ml)")

    g_per_ml = req.density.grams / (req.density.per_qty * definition.to_base)

    # Water = 1.0. Flour ~ 0.5. Sugar ~ 0.85. Salt ~ 1.2.
    if not (0.05 <= g_per_ml <= 5.0):
        raise HTTPException(status_code=400, detail="Density out of sane range (0.05 - 5.0 g/ml)")

    grams_per_cup = g_per_ml * UNIT_DEFINITIONS["cup"].to_base

    # 3. Store
    try:
        cached = resolver.learn(req.ingredient_name, grams_per_cup, req.kind, req.confidence)
    except RedisError as e:
        logger.error("Failed to store density for %r: %s", req.ingredient_name, e)
        raise HTTPException(status_code=503, detail="Density cache unavailable")

    return DensityUpsertResponse(
        ingredient_key=key,
        is_dry_convertible=req.kind != "wet",
        grams_per_cup=grams_per_cup,
        kind=req.kind,
        source="learned" if cached else "request",
        cached=cached,
    )


@router.delete("/densities/{name}")
def delete_density(
    name: str,
    resolver: CachedDensityResolver = Depends(get_density_resolver),
):
    try:
        removed = resolver.forget(name)
    except RedisError as e:
        logger.error("Failed to delete density for %r: %s", name, e)
        raise HTTPException(status_code=503, detail="Density cache unavailable")

    if not removed:
        raise HTTPException(404, "Learned density not found")
    return {"ok": True}
