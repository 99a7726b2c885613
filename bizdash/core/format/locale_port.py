"""
LocaleFormatter — порт локализованного форматирования

Форматтеры не обращаются к глобальному состоянию локалей напрямую:
примитив локализованного форматирования передаётся явно (protocol
LocaleFormatter). По умолчанию используется BabelLocaleFormatter (CLDR
данные Babel), в тестах можно подставить детерминированную реализацию.

Поверх шаблонов Babel применяются два правила CLDR, которых Babel
не реализует:
- currencySpacing: между буквенным символом валюты и цифрой ставится
  неразрывный пробел ("USD 1,234.50", а не "USD1,234.50")
- minimumGroupingDigits: в локалях со значением 2 (es-ES) четырёхзначная
  целая часть не группируется ("1234,50 US$", но "12.345,00 US$")

Округление — половина от нуля (ROUND_HALF_UP) по десятичной записи float:
0.125 → 0.13, 0.0025 → 0,3 %.
"""

import unicodedata
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final, Protocol

from babel import Locale
from babel.core import get_global
from babel.dates import format_date as babel_format_date
from babel.numbers import NumberPattern, get_currency_symbol, parse_pattern

from bizdash.core.domain.options import parse_locale_tag

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Неразрывный пробел CLDR currencySpacing/insertBetween
CURRENCY_SPACING: Final[str] = "\xa0"

# CLDR minimumGroupingDigits (по умолчанию 1); наследование через parentLocales
MIN_GROUPING_DIGITS: Final[dict[str, int]] = {
    "es": 2,
    "es_419": 1,
    "pl": 2,
    "pt_PT": 2,
}

# Точность decimal-контекста: хватает на любой finite float
DECIMAL_PRECISION: Final[int] = 330


class LocaleFormatter(Protocol):
    """Примитив локализованного форматирования чисел и дат."""

    def currency(self, value: float, currency: str, locale: str) -> str:
        """Денежная сумма с ровно двумя знаками после запятой."""
        ...

    def percent(self, fraction: float, locale: str, fraction_digits: int) -> str:
        """Доля 0–1 как процент с фиксированным числом знаков."""
        ...

    def date(self, value: date, pattern: str, locale: str) -> str:
        """Календарная дата по CLDR-шаблону (например, "d MMM y")."""
        ...


# =============================================================================
# CLDR ПРАВИЛА
# =============================================================================


def min_grouping_digits(locale: Locale) -> int:
    """
    minimumGroupingDigits локали.

    Идём по цепочке родителей: es_MX → es_419 (parentLocales), es_ES → es.

    Examples:
        >>> min_grouping_digits(Locale.parse("es_ES"))
        2
        >>> min_grouping_digits(Locale.parse("es_MX"))
        1
    """
    parents = get_global("parent_exceptions")
    identifier = str(locale)
    while identifier:
        if identifier in MIN_GROUPING_DIGITS:
            return MIN_GROUPING_DIGITS[identifier]
        if identifier in parents:
            identifier = parents[identifier]
        elif "_" in identifier:
            identifier = identifier.rsplit("_", 1)[0]
        else:
            break
    return 1


def _integer_digits(number: Decimal, fraction_digits: int) -> int:
    """Количество цифр целой части после округления."""
    rounded = abs(number).quantize(Decimal(1).scaleb(-fraction_digits))
    return len(str(int(rounded)))


def _use_grouping(pattern: NumberPattern, number: Decimal, fraction_digits: int, locale: Locale) -> bool:
    # Разделитель появляется, только если цифр не меньше grouping + minimumGroupingDigits
    threshold = pattern.grouping[0] + min_grouping_digits(locale)
    return _integer_digits(number, fraction_digits) >= threshold


def _needs_spacing(edge: str) -> bool:
    # currencyMatch [:^S:]: пробел нужен, если край символа не является знаком (S*)
    return unicodedata.category(edge)[0] != "S"


def _space_currency(pattern: NumberPattern, symbol: str) -> None:
    """Вставка CURRENCY_SPACING между символом валюты и числом."""
    if not symbol:
        return
    if _needs_spacing(symbol[-1]):
        pattern.prefix = tuple(
            f"{p}{CURRENCY_SPACING}" if p.endswith("¤") else p for p in pattern.prefix
        )
    if _needs_spacing(symbol[0]):
        pattern.suffix = tuple(
            f"{CURRENCY_SPACING}{s}" if s.startswith("¤") else s for s in pattern.suffix
        )


# =============================================================================
# BABEL
# =============================================================================


class BabelLocaleFormatter:
    """
    LocaleFormatter на основе Babel.

    Позиция символа валюты и формат отрицательных сумм берутся
    из CLDR-шаблонов локали; группировка и отступ символа валюты
    дополнительно следуют правилам из шапки модуля.
    """

    def currency(self, value: float, currency: str, locale: str) -> str:
        babel_locale = parse_locale_tag(locale)
        # Шаблон парсится заново: объекты из locale data общие
        pattern = parse_pattern(babel_locale.currency_formats["standard"].pattern)
        _space_currency(pattern, get_currency_symbol(currency, babel_locale))

        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            ctx.rounding = ROUND_HALF_UP
            number = Decimal(str(value))
            # currency_digits=False: точность задаёт шаблон локали (#,##0.00),
            # а не валюта (JPY иначе ушёл бы в 0 знаков)
            return pattern.apply(
                number,
                babel_locale,
                currency=currency,
                currency_digits=False,
                group_separator=_use_grouping(pattern, number, pattern.frac_prec[1], babel_locale),
            )

    def percent(self, fraction: float, locale: str, fraction_digits: int) -> str:
        if fraction_digits < 0:
            raise ValueError(f"fraction_digits must be non-negative, got {fraction_digits}")

        babel_locale = parse_locale_tag(locale)
        pattern = parse_pattern(babel_locale.percent_formats[None].pattern)
        pattern.frac_prec = (fraction_digits, fraction_digits)

        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            ctx.rounding = ROUND_HALF_UP
            number = Decimal(str(fraction))
            scaled = number.scaleb(pattern.scale)
            return pattern.apply(
                number,
                babel_locale,
                group_separator=_use_grouping(pattern, scaled, fraction_digits, babel_locale),
            )

    def date(self, value: date, pattern: str, locale: str) -> str:
        return babel_format_date(value, format=pattern, locale=parse_locale_tag(locale))


DEFAULT_LOCALE_FORMATTER = BabelLocaleFormatter()
