"""
Router for unit conversion utilities.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_density_resolver
from ..schemas import (
    UnitNormalizeResponse, UnitConvertRequest, UnitConvertResponse,
    DisplayRequest, DisplayResponse, DisplayLineOut,
    AggregateRequest, AggregateResponse, AggregatedItemOut,
    TemperatureConvertRequest, TemperatureConvertResponse,
    TemperatureDetectRequest, TemperatureDetectResponse, TemperatureMentionOut,
)
from ..services.ingredient_density import DensityResolver
from ..services.ingredient_display import ORIGINAL, format_ingredient_display, resolve_display_system
from ..services.quantity_format import format_quantity
from ..services.shopping_aggregate import aggregate_quantities
from ..services.temperature import convert_temperature, detect_temperatures_in_text, temperature_scale
from ..services.unit_conversion import IngredientQuantity, convert_quantity, convert_with_ingredient
from ..services.unit_registry import UnitSystem, can_convert, get_unit_definition
from ..settings import settings

router = APIRouter()


@router.get("/normalize", response_model=UnitNormalizeResponse)
def normalize(unit: str = Query(..., max_length=50)):
    """Canonical name, category and system for free-text unit."""
    definition = get_unit_definition(unit)
    return UnitNormalizeResponse(
        input=unit,
        canonical=definition.name if definition else None,
        category=definition.category.value if definition else "other",
        system=definition.system.value if definition and definition.system else None,
        convertible=can_convert(unit),
    )


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(
    req: UnitConvertRequest,
    resolver: DensityResolver = Depends(get_density_resolver),
):
    """
    Convert a quantity to the target system.
    With an ingredient name, dry ingredients headed for metric become grams.
    """
    system = UnitSystem(req.target_system)
    if req.ingredient_name:
        result = convert_with_ingredient(req.qty, req.from_unit, system, req.ingredient_name, resolver=resolver)
    else:
        result = convert_quantity(req.qty, req.from_unit, system)

    return UnitConvertResponse(
        qty=result.amount,
        unit=result.unit,
        converted=result.converted,
        quantity_text=format_quantity(result.amount),
    )


@router.post("/display", response_model=DisplayResponse)
def display_ingredients(
    req: DisplayRequest,
    resolver: DensityResolver = Depends(get_density_resolver),
):
    """Display lines for a recipe's ingredient list."""
    system = resolve_display_system(UnitSystem(settings.default_unit_system), req.system)
    if system != ORIGINAL:
        system = UnitSystem(system)

    lines = []
    for ing in req.ingredients:
        line = format_ingredient_display(
            IngredientQuantity(amount=ing.qty, unit=ing.unit or "", ingredient_name=ing.name),
            system,
            req.serving_multiplier,
            resolver=resolver,
        )
        lines.append(DisplayLineOut(
            quantity_text=line.quantity_text,
            unit=line.unit,
            name=line.ingredient_name,
            original_text=line.original_text,
        ))

    return DisplayResponse(system=ORIGINAL if system == ORIGINAL else system.value, lines=lines)


@router.post("/aggregate", response_model=AggregateResponse)
def aggregate(req: AggregateRequest):
    """Consolidate ingredient quantities for a shopping list."""
    system = UnitSystem(req.target_system or settings.default_unit_system)
    items = [
        IngredientQuantity(amount=i.qty, unit=i.unit or "", ingredient_name=i.name)
        for i in req.items
    ]
    lines = aggregate_quantities(items, system)
    return AggregateResponse(items=[
        AggregatedItemOut(
            key=line.ingredient_key,
            name=line.ingredient_name,
            qty=line.amount,
            unit=line.unit,
            quantity_text=line.quantity_text,
        )
        for line in lines
    ])


@router.post("/temperature", response_model=TemperatureConvertResponse)
def convert_temp(req: TemperatureConvertRequest):
    try:
        value = convert_temperature(req.value, req.from_unit, req.to_unit)
        scale = temperature_scale(req.to_unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TemperatureConvertResponse(value=value, unit=scale, text=f"{round(value)}°{scale}")


@router.post("/temperature/detect", response_model=TemperatureDetectResponse)
def detect_temps(req: TemperatureDetectRequest):
    mentions = detect_temperatures_in_text(req.text)
    return TemperatureDetectResponse(mentions=[
        TemperatureMentionOut(value=m.value, unit=m.unit, match=m.match, index=m.index)
        for m in mentions
    ])
