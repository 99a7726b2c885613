"""
FormatOptions — Конфигурация форматирования

Immutable Pydantic модель с параметрами форматирования денежных сумм:
код валюты (ISO 4217) и locale tag. Каждый вызывающий явно передаёт свою
конфигурацию вместо двух захардкоженных форматтеров.

Готовые конфигурации:
- DEFAULT_FORMAT_OPTIONS: USD / es-MX (настраиваемый форматтер)
- DASHBOARD_FORMAT_OPTIONS: USD / es-ES (фиксированный для виджетов дашборда)
"""

from functools import lru_cache
from typing import Final

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, Field, field_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEFAULT_CURRENCY: Final[str] = "USD"

DEFAULT_LOCALE: Final[str] = "es-MX"

# Локаль виджетов дашборда (проценты, даты, карточки)
DASHBOARD_LOCALE: Final[str] = "es-ES"


# =============================================================================
# LOCALE TAGS
# =============================================================================


@lru_cache(maxsize=64)
def parse_locale_tag(tag: str) -> Locale:
    """
    Разбор locale tag в Babel Locale.

    Принимает оба разделителя: "es-MX" и "es_MX".

    Args:
        tag: Locale tag

    Returns:
        Babel Locale

    Raises:
        ValueError: Если tag пустой или Babel не знает такой локали
    """
    if not tag or not tag.strip():
        raise ValueError("locale tag must be a non-empty string")

    sep = "-" if "-" in tag else "_"
    try:
        return Locale.parse(tag.strip(), sep=sep)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise ValueError(f"Unknown locale tag: {tag!r} ({e})") from e


# =============================================================================
# FORMAT OPTIONS
# =============================================================================


class FormatOptions(BaseModel):
    """
    Параметры форматирования денежных сумм.

    Immutable модель (frozen=True).
    """

    currency: str = Field(
        DEFAULT_CURRENCY,
        pattern="^[A-Z]{3}$",
        description="Код валюты ISO 4217 (USD, EUR, MXN)",
    )
    locale: str = Field(
        DEFAULT_LOCALE,
        min_length=2,
        description="Locale tag (es-MX, es-ES)",
    )

    model_config = {"frozen": True}

    @field_validator("locale")
    @classmethod
    def check_locale(cls, value: str) -> str:
        parse_locale_tag(value)
        return value


DEFAULT_FORMAT_OPTIONS: Final[FormatOptions] = FormatOptions()

DASHBOARD_FORMAT_OPTIONS: Final[FormatOptions] = FormatOptions(
    currency=DEFAULT_CURRENCY,
    locale=DASHBOARD_LOCALE,
)
