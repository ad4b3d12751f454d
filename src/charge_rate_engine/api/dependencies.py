"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from charge_rate_engine.calculators.batch import BatchCalculator
from charge_rate_engine.config import Settings, get_settings


def get_batch_calculator(
    settings: Annotated[Settings, Depends(get_settings)],
) -> BatchCalculator:
    """Build a batch calculator stamped with the running engine version."""
    return BatchCalculator(engine_version=settings.engine_version)


# Type aliases for cleaner dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
Calculator = Annotated[BatchCalculator, Depends(get_batch_calculator)]
