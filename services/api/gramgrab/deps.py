"""FastAPI dependencies for the GramGrab units API.

Provides:
- Density resolver (learned Redis cache over the static table)
"""

from .services.ingredient_density import CachedDensityResolver, default_density_resolver
from .settings import settings


def get_density_resolver() -> CachedDensityResolver:
    """Resolver used by conversion and display endpoints. Overridable in tests."""
    return CachedDensityResolver(
        fallback=default_density_resolver(),
        ttl_days=settings.density_cache_ttl_days,
        min_confidence=settings.density_min_confidence,
    )
