"""
Indicator computations using the 'ta' library.
Both helpers take chronological closes (oldest first) and return only the
defined values, so warm-up bars never show up as NaN.
"""
from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pandas as pd
from ta.momentum import ROCIndicator
from ta.trend import MACD

ROC_PERIOD = 5
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL = 9


def _close_series(closes: Sequence[float]) -> pd.Series:
    return pd.Series(np.asarray(closes, dtype=float))


def _defined(series: pd.Series) -> List[float]:
    # warm-up bars are NaN; a zero close upstream turns ROC into +-inf
    series = series.replace([np.inf, -np.inf], np.nan)
    return series.dropna().astype(float).tolist()


def rate_of_change(closes: Sequence[float], period: int = ROC_PERIOD) -> List[float]:
    if len(closes) <= period:
        return []
    roc = ROCIndicator(_close_series(closes), window=period).roc()
    return _defined(roc)


def macd_histogram(closes: Sequence[float], fast: int = MACD_FAST, slow: int = MACD_SLOW,
                   signal: int = MACD_SIGNAL) -> List[float]:
    """MACD minus its signal line; empty until slow + signal - 1 closes exist."""
    if len(closes) < slow + signal - 1:
        return []
    macd = MACD(_close_series(closes), window_slow=slow, window_fast=fast, window_sign=signal)
    return _defined(macd.macd_diff())
