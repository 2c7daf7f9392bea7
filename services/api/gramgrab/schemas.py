"""Pydantic schemas for the GramGrab units API.

Request/response models for:
- Unit normalization and conversion
- Ingredient display lines
- Shopping list aggregation
- Temperatures
- Ingredient densities
"""

from typing import Optional, Literal

from pydantic import BaseModel, Field


SystemName = Literal["metric", "imperial"]
DisplaySystemName = Literal["metric", "imperial", "original"]
IngredientKind = Literal["dry", "powder", "fat", "wet"]


# --- Units ---

class UnitNormalizeResponse(BaseModel):
    input: str
    canonical: Optional[str]
    category: str
    system: Optional[SystemName]
    convertible: bool


class UnitConvertRequest(BaseModel):
    qty: float = Field(..., allow_inf_nan=False)
    from_unit: str
    target_system: SystemName
    ingredient_name: Optional[str] = None


class UnitConvertResponse(BaseModel):
    qty: float
    unit: str
    converted: bool
    quantity_text: str


# --- Display ---

class IngredientIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    qty: Optional[float] = Field(None, allow_inf_nan=False)
    unit: Optional[str] = None


class DisplayRequest(BaseModel):
    ingredients: list[IngredientIn]
    system: Optional[DisplaySystemName] = None  # None -> settings.default_unit_system
    serving_multiplier: float = Field(1.0, gt=0, allow_inf_nan=False)


class DisplayLineOut(BaseModel):
    quantity_text: str
    unit: str
    name: str
    original_text: Optional[str] = None


class DisplayResponse(BaseModel):
    system: DisplaySystemName
    lines: list[DisplayLineOut]


# --- Shopping aggregation ---

class AggregateRequest(BaseModel):
    items: list[IngredientIn]
    target_system: Optional[SystemName] = None


class AggregatedItemOut(BaseModel):
    key: str
    name: str
    qty: Optional[float]
    unit: str
    quantity_text: str


class AggregateResponse(BaseModel):
    items: list[AggregatedItemOut]


# --- Temperature ---

class TemperatureConvertRequest(BaseModel):
    value: float = Field(..., allow_inf_nan=False)
    from_unit: str
    to_unit: str


class TemperatureConvertResponse(BaseModel):
    value: float
    unit: Literal["C", "F"]
    text: str


class TemperatureDetectRequest(BaseModel):
    text: str = Field(..., max_length=50000)


class TemperatureMentionOut(BaseModel):
    value: int
    unit: Literal["C", "F"]
    match: str
    index: int


class TemperatureDetectResponse(BaseModel):
    mentions: list[TemperatureMentionOut]


# --- Densities ---

class DensityInput(BaseModel):
    grams: float = Field(..., gt=0, allow_inf_nan=False)
    per_qty: float = Field(1.0, gt=0, allow_inf_nan=False)
    per_unit: str = "cup"


class DensityUpsert(BaseModel):
    ingredient_name: str = Field(..., min_length=1, max_length=200)
    density: DensityInput
    kind: IngredientKind = "dry"
    confidence: float = Field(1.0, ge=0, le=1)


class DensityOut(BaseModel):
    ingredient_key: str
    is_dry_convertible: bool
    grams_per_cup: Optional[float]
    kind: Optional[IngredientKind] = None
    source: str


class DensityUpsertResponse(DensityOut):
    cached: bool
