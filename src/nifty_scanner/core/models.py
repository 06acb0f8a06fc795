"""
Data models for the scanner.
No implementation logic, only Pydantic models and typed structures.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Direction = Literal["buy", "sell"]


class PriceBar(BaseModel):
    """One intraday bar as delivered by the provider (only the close is kept)."""
    timestamp: str = Field(..., description="Provider timestamp of the bar")
    close: float = Field(..., description="Closing price")


class IndicatorReadings(BaseModel):
    model_config = ConfigDict(frozen=True)

    roc: float = Field(0.0, description="Latest rate-of-change value")
    macd: float = Field(0.0, description="Latest MACD histogram value")


class StockResult(BaseModel):
    """Per-symbol scan result.
    Built once per scan, by the stock processor or the fallback generator,
    and never changed afterwards.
    """
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Symbol without exchange suffix")
    price: float = Field(..., description="Latest close")
    change: float = Field(..., description="Percent change over the last bar")
    volatility: float = Field(..., description="Mean absolute bar-to-bar percent change")
    probability: int = Field(..., ge=0, le=90, description="Signal confidence")
    direction: Direction = Field(..., description="buy or sell")
    indicators: IndicatorReadings = Field(default_factory=IndicatorReadings)
