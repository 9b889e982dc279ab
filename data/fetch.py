import logging
from typing import Optional

import numpy as np
import pandas as pd
import streamlit as st
import yfinance as yf

logger = logging.getLogger(__name__)


def _close_series(df: pd.DataFrame, ticker: str) -> pd.Series:
    if df is None or df.empty:
        return pd.Series(dtype=float)

    # yfinance may return (field, ticker) MultiIndex columns even for one symbol
    if isinstance(df.columns, pd.MultiIndex):
        lvl0 = df.columns.get_level_values(0)
        lvl1 = df.columns.get_level_values(1)
        if ticker in set(lvl1):
            df = df.xs(ticker, axis=1, level=1, drop_level=True)
        elif ticker in set(lvl0):
            df = df.xs(ticker, axis=1, level=0, drop_level=True)
        else:
            df.columns = [c[0] if isinstance(c, tuple) else c for c in df.columns]

    close = None
    for c in df.columns:
        if isinstance(c, str) and c.strip().lower() in ("close", "adj close", "adj_close", "adjclose"):
            close = df[c]
            if c.strip().lower() == "close":
                break

    if close is None:
        return pd.Series(dtype=float)
    if isinstance(close, pd.DataFrame):
        close = close.iloc[:, 0]

    close = pd.to_numeric(close, errors="coerce")
    return close[np.isfinite(close)]


@st.cache_data(ttl=60 * 5, show_spinner=False)
def last_close(ticker: str, period: str = "5d") -> Optional[float]:
    """Most recent daily close for ticker, or None when no quote is available."""
    ticker = (ticker or "").strip().upper()
    if not ticker:
        return None

    try:
        raw = yf.download(
            ticker,
            period=period,
            interval="1d",
            auto_adjust=False,
            progress=False,
            group_by="column",
            threads=False,
        )
    except Exception as exc:
        logger.warning("Quote lookup failed for %s: %s", ticker, exc)
        return None

    close = _close_series(raw, ticker)
    close = close[close > 0]
    if close.empty:
        logger.warning("No quote returned for %s", ticker)
        return None
    return float(close.iloc[-1])
