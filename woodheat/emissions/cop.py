"""Coefficient of performance for each heat source.

Overrides arrive as raw user text. Anything that does not parse to a
positive finite number counts as "no override".
"""

from __future__ import annotations

from typing import Any

from woodheat.models.config_models import DEFAULTS, EmissionDefaults
from woodheat.models.constants import HeatSource
from woodheat.utils.numbers import clamp, parse_finite, parse_positive


def ashp_cop(temperature_c: float, defaults: EmissionDefaults = DEFAULTS) -> float:
    """Air-source heat pump COP at an ambient temperature in °C."""
    p = defaults.ashp
    return clamp(p.a + p.b * temperature_c, p.min_cop, p.max_cop)


def gshp_cop(defaults: EmissionDefaults = DEFAULTS) -> float:
    """Ground-source heat pump COP (temperature independent)."""
    return defaults.gshp.base_cop


def resolve_cop(
    source: HeatSource,
    temperature_c: Any = None,
    override: Any = None,
    district_cop: Any = None,
    defaults: EmissionDefaults = DEFAULTS,
) -> float | None:
    """Effective COP for a heat source.

    Parameters
    ----------
    source : HeatSource
        Selected heat source.
    temperature_c : Any
        Current ambient temperature; the configured default ambient
        temperature is used when missing or not finite.
    override : Any
        Manual COP for heat pumps. Replaces the computed value when it
        parses to a positive number.
    district_cop : Any
        User-entered COP for district heating.

    Returns
    -------
    float | None
        The COP, or None for combustion sources where it does not apply.
    """
    if source == HeatSource.ASHP:
        manual = parse_positive(override)
        if manual is not None:
            return manual
        temp = parse_finite(temperature_c)
        if temp is None:
            temp = defaults.default_ambient_temp_c
        return ashp_cop(temp, defaults)

    if source == HeatSource.GSHP:
        manual = parse_positive(override)
        return manual if manual is not None else gshp_cop(defaults)

    if source == HeatSource.DH:
        entered = parse_positive(district_cop)
        return entered if entered is not None else defaults.district.cop

    if source == HeatSource.RESISTIVE:
        return 1.0

    return None
