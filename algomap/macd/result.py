"""Containers for MACD indicator results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ColorIntensity(Enum):
    """Shade of a MACD histogram bar."""

    DARK_RED = "dark_red"
    LIGHT_RED = "light_red"
    DARK_GREEN = "dark_green"
    LIGHT_GREEN = "light_green"
    ZERO = "zero"


_LABELS = {
    ColorIntensity.DARK_RED: "深红柱",
    ColorIntensity.LIGHT_RED: "浅红柱",
    ColorIntensity.DARK_GREEN: "深绿柱",
    ColorIntensity.LIGHT_GREEN: "浅绿柱",
    ColorIntensity.ZERO: "零轴",
}


def color_intensity_label(intensity: ColorIntensity) -> str:
    """Return the display label of a histogram colour."""
    return _LABELS.get(intensity, "未知")


@dataclass
class MACDResult:
    """Aligned series produced by a MACD calculation."""

    dates: list[str] = field(default_factory=list)
    prices: list[float] = field(default_factory=list)
    ema12: list[float] = field(default_factory=list)
    ema26: list[float] = field(default_factory=list)
    dif: list[float] = field(default_factory=list)
    dea: list[float] = field(default_factory=list)
    histogram: list[float] = field(default_factory=list)
    histogram_colors: list[ColorIntensity] = field(default_factory=list)

    def clear(self) -> None:
        """Empty every series."""
        for series in (
            self.dates,
            self.prices,
            self.ema12,
            self.ema26,
            self.dif,
            self.dea,
            self.histogram,
            self.histogram_colors,
        ):
            series.clear()

    def is_empty(self) -> bool:
        """True when there are no prices or no DIF values."""
        return not self.prices or not self.dif