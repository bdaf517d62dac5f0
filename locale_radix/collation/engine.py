"""ICU-backed locale comparison engines."""

from __future__ import annotations

from typing import Callable, Protocol

from locale_radix.common.constants import DEFAULT_SENSITIVITY, SENSITIVITIES
from locale_radix.common.errors import ConfigError


class ComparisonEngine(Protocol):
    def compare(self, left: str, right: str) -> int: ...


EngineFactory = Callable[[str], ComparisonEngine]


def parse_sensitivity(value: str | None) -> str:
    if value is None:
        return DEFAULT_SENSITIVITY
    normalised = value.strip().lower()
    if normalised not in SENSITIVITIES:
        raise ConfigError(f"Unknown sensitivity {value!r}; expected one of {', '.join(SENSITIVITIES)}")
    return normalised


def build_icu_collator(locale: str, sensitivity: str = DEFAULT_SENSITIVITY):
    """Create an ICU collator for a BCP-47 tag at the requested sensitivity.

    ``base`` ignores case and accents, ``accent`` distinguishes accents only,
    ``case`` distinguishes case only and ``variant`` distinguishes both.
    Failures raised by ICU for a tag propagate unchanged.
    """
    from icu import Collator, Locale, UCollAttribute, UCollAttributeValue

    sensitivity = parse_sensitivity(sensitivity)
    collator = Collator.createInstance(Locale.forLanguageTag(locale))
    if sensitivity == "base":
        collator.setStrength(Collator.PRIMARY)
    elif sensitivity == "accent":
        collator.setStrength(Collator.SECONDARY)
    elif sensitivity == "case":
        collator.setStrength(Collator.PRIMARY)
        collator.setAttribute(UCollAttribute.CASE_LEVEL, UCollAttributeValue.ON)
    else:
        collator.setStrength(Collator.TERTIARY)
    return collator


def icu_engine_factory(sensitivity: str = DEFAULT_SENSITIVITY) -> EngineFactory:
    sensitivity = parse_sensitivity(sensitivity)

    def factory(locale: str) -> ComparisonEngine:
        return build_icu_collator(locale, sensitivity)

    return factory
