"""
Настройки приложения.
"""

from pydantic import BaseModel, Field

from .shared_kernel import DEFAULT_DATE_FORMAT
from .shared_kernel.infrastructure import DEFAULT_LOGGER_NAME


class Settings(BaseModel):
    """Параметры, передаваемые в ``bootstrap_app``."""

    logger_name: str = DEFAULT_LOGGER_NAME
    log_level: str = "INFO"
    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT, description="Формат дат в отчетах и при разборе строк"
    )
    first_booking_id: int = Field(default=1, ge=1)
