"""
Weekday and month abbreviations for heatmap labels.

Supports English (default and fallback), German, French and Spanish.
"""

DEFAULT_LANGUAGE = "en"

# Monday -> Sunday
WEEKDAY_SHORT_NAMES: dict[str, tuple[str, ...]] = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "de": ("Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.", "So."),
    "fr": ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
    "es": ("lun.", "mar.", "mié.", "jue.", "vie.", "sáb.", "dom."),
}

# January -> December
MONTH_ABBREVIATIONS: dict[str, tuple[str, ...]] = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "de": ("Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
           "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez."),
    "fr": ("janv.", "févr.", "mars", "avr.", "mai", "juin",
           "juil.", "août", "sept.", "oct.", "nov.", "déc."),
    "es": ("ene.", "feb.", "mar.", "abr.", "may.", "jun.",
           "jul.", "ago.", "sept.", "oct.", "nov.", "dic."),
}


def language_code(locale: str | None) -> str:
    """
    Reduce a locale tag to its lower-cased language subtag.

    "es-MX", "es_ES" and "ES" all become "es".
    """
    if not locale:
        return DEFAULT_LANGUAGE
    return locale.replace("_", "-").split("-", 1)[0].strip().lower() or DEFAULT_LANGUAGE


def weekday_short_names(locale: str | None) -> list[str]:
    """
    Monday-first weekday short names for a locale.

    Falls back to English for unsupported locales.
    """
    code = language_code(locale)
    names = WEEKDAY_SHORT_NAMES.get(code, WEEKDAY_SHORT_NAMES[DEFAULT_LANGUAGE])
    return list(names)


def month_abbreviation(month: int, locale: str | None) -> str:
    """
    Abbreviated month name.

    Args:
        month: Month number (1-12)
        locale: Locale tag, English is used when unsupported

    Raises:
        ValueError: If month is outside 1..12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    code = language_code(locale)
    months = MONTH_ABBREVIATIONS.get(code, MONTH_ABBREVIATIONS[DEFAULT_LANGUAGE])
    return months[month - 1]
