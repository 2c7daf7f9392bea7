"""
Ingredient Density Resolver for GramGrab.

Decides whether a volume of an ingredient should be shown as a weight
(dry goods) or stay a volume (liquids), and how many grams one US cup weighs.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from redis import RedisError

from ..infra import redis_cache
from .density_table import CATEGORY_FALLBACKS, INGREDIENT_DENSITIES, WET_KEYWORDS
from .ingredient_normalize import normalize_ingredient_key

logger = logging.getLogger("gramgrab.density")

DRY_KINDS = frozenset({"dry", "powder", "fat"})
INGREDIENT_KINDS = ("dry", "powder", "fat", "wet")

CACHE_PREFIX = "density:"


@dataclass(frozen=True)
class DensityInfo:
    is_dry_convertible: bool
    grams_per_cup: Optional[float] = None
    source: str = "none"  # table, learned, heuristic, none
    kind: Optional[str] = None

    @classmethod
    def declined(cls) -> "DensityInfo":
        return cls(is_dry_convertible=False)

    @classmethod
    def from_kind(cls, grams_per_cup: float, kind: str, source: str) -> "DensityInfo":
        return cls(
            is_dry_convertible=kind in DRY_KINDS,
            grams_per_cup=float(grams_per_cup),
            source=source,
            kind=kind,
        )


class DensityResolver(ABC):
    """Ingredient name -> dry/wet classification and grams per cup."""

    @abstractmethod
    def resolve(self, ingredient_name: str) -> DensityInfo:
        ...


def _singular(word: str) -> str:
    if len(word) > 3 and word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def _contains_phrase(text: str, phrase: str) -> bool:
    return re.search(rf"(?<!\w){re.escape(phrase)}(?!\w)", text) is not None


class TableDensityResolver(DensityResolver):
    """
    Density lookup against the static table.

    Matching order:
    1. Exact name or alias
    2. Whole-phrase containment, longest key first
    3. Word overlap
    4. Category fallbacks (flour, sugar, oil, ...)
    Unmatched names get no density; wet-sounding ones are classified wet.
    """

    def __init__(self, table=None):
        self._table = INGREDIENT_DENSITIES if table is None else table
        self._index = {}
        for name, (_, _, aliases) in self._table.items():
            self._index.setdefault(name.lower(), name)
            for alias in aliases:
                self._index.setdefault(alias.lower(), name)
        self._by_length = sorted(self._index, key=len, reverse=True)

    def _info(self, name: str) -> DensityInfo:
        grams_per_cup, kind, _ = self._table[name]
        return DensityInfo.from_kind(grams_per_cup, kind, source="table")

    def find(self, ingredient_name: str) -> Optional[str]:
        """Table entry name that best matches `ingredient_name`, if any."""
        normalized = (ingredient_name or "").lower().strip()
        if not normalized:
            return None

        # 1. Direct match
        if normalized in self._index:
            return self._index[normalized]

        # 2. Phrase containment in either direction
        for key in self._by_length:
            if _contains_phrase(normalized, key) or (len(normalized) > 3 and _contains_phrase(key, normalized)):
                return self._index[key]

        # 3. Word overlap
        words = [_singular(w) for w in re.split(r"[\s,]+", normalized) if len(w) > 2]
        if words:
            needed = min(2, len(words))
            best, best_count = None, 0
            for key in self._index:
                key_words = {_singular(kw) for kw in re.split(r"[\s,]+", key)}
                count = sum(1 for w in words if w in key_words)
                if count >= needed and count > best_count:
                    best, best_count = key, count
            if best:
                return self._index[best]

        # 4. Category patterns
        for keyword, excluded, entry in CATEGORY_FALLBACKS:
            if keyword in normalized and not any(x in normalized for x in excluded):
                return entry

        return None

    def resolve(self, ingredient_name: str) -> DensityInfo:
        match = self.find(ingredient_name)
        if match:
            return self._info(match)

        normalized = (ingredient_name or "").lower()
        if not normalized.strip():
            return DensityInfo.declined()
        is_wet = any(keyword in normalized for keyword in WET_KEYWORDS)
        return DensityInfo(is_dry_convertible=not is_wet, source="heuristic")


class CachedDensityResolver(DensityResolver):
    """
    Learned densities from Redis first, then the fallback resolver.

    Learned entries come from clients (user overrides, AI lookups) and expire
    after `ttl_days`.
    """

    def __init__(self, fallback: DensityResolver, ttl_days: int = 30, min_confidence: float = 0.5):
        self.fallback = fallback
        self.ttl_sec = ttl_days * 24 * 60 * 60
        self.min_confidence = min_confidence

    @staticmethod
    def cache_key(ingredient_name: str) -> Optional[str]:
        key = normalize_ingredient_key(ingredient_name)
        return f"{CACHE_PREFIX}{key}" if key else None

    def get_learned(self, ingredient_name: str) -> Optional[DensityInfo]:
        key = self.cache_key(ingredient_name)
        if not key:
            return None
        try:
            entry = redis_cache.get_json_sync(key)
        except RedisError as e:
            logger.warning("Density cache unavailable for %r: %s", ingredient_name, e)
            return None
        except ValueError as e:
            logger.warning("Unreadable density cache entry %s: %s", key, e)
            return None
        if entry and not isinstance(entry, dict):
            logger.warning("Unexpected density cache entry %s: %r", key, entry)
            return None
        grams_per_cup = entry.get("grams_per_cup") if entry else None
        if not isinstance(grams_per_cup, (int, float)) or grams_per_cup <= 0 or entry.get("kind") not in INGREDIENT_KINDS:
            return None
        return DensityInfo.from_kind(entry["grams_per_cup"], entry["kind"], source="learned")

    def resolve(self, ingredient_name: str) -> DensityInfo:
        learned = self.get_learned(ingredient_name)
        if learned:
            return learned
        return self.fallback.resolve(ingredient_name)

    def learn(self, ingredient_name: str, grams_per_cup: float, kind: str, confidence: float = 1.0) -> bool:
        """
        Store a learned density. Returns False when it was not cached
        (low confidence or empty name).

        Redis errors propagate; callers writing densities need to know.
        """
        key = self.cache_key(ingredient_name)
        if not key or confidence < self.min_confidence:
            return False
        redis_cache.set_json_sync(
            key,
            {"grams_per_cup": grams_per_cup, "kind": kind, "confidence": confidence},
            self.ttl_sec,
        )
        logger.info("Learned density for %r: %.1f g/cup (%s)", ingredient_name, grams_per_cup, kind)
        return True

    def forget(self, ingredient_name: str) -> bool:
        key = self.cache_key(ingredient_name)
        if not key:
            return False
        return redis_cache.delete_sync(key)


@lru_cache(maxsize=1)
def default_density_resolver() -> TableDensityResolver:
    """Process-wide table resolver, built once."""
    return TableDensityResolver()


def cups_to_grams(cups: float, ingredient_name: str, resolver: Optional[DensityResolver] = None) -> Optional[float]:
    info = (resolver or default_density_resolver()).resolve(ingredient_name)
    if not info.grams_per_cup:
        return None
    return cups * info.grams_per_cup


def grams_to_cups(grams: float, ingredient_name: str, resolver: Optional[DensityResolver] = None) -> Optional[float]:
    info = (resolver or default_density_resolver()).resolve(ingredient_name)
    if not info.grams_per_cup:
        return None
    return grams / info.grams_per_cup
