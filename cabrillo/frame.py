"""
Tabular view of parsed contacts.

Flattens a list of ``QSO`` objects into a ``pandas.DataFrame`` with one
row per contact, for rate, band and duplicate analysis. Frequency stays
a string column: below 30 MHz it is kHz, above it is a band label
(``50``, ``144``, ``LIGHT``), so it is not coerced to numeric.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from cabrillo.parsers.qso import QSO

QSO_COLUMNS = [
    "frequency",
    "mode",
    "timestamp",
    "tx_call",
    "tx_rst",
    "tx_exchange",
    "rx_call",
    "rx_rst",
    "rx_exchange",
    "transmitter",
]


def qsos_to_frame(qsos: Iterable[QSO]) -> pd.DataFrame:
    """Build a DataFrame with one row per QSO and ``QSO_COLUMNS`` as columns.

    RST values are rendered in canonical text form (``"599"``, ``"59"``).
    An empty input yields an empty frame with the same columns.
    """
    rows = [
        {
            "frequency": qso.frequency,
            "mode": qso.mode,
            "timestamp": qso.timestamp,
            "tx_call": qso.tx_info.callsign,
            "tx_rst": str(qso.tx_info.signal_report),
            "tx_exchange": qso.tx_info.exchange,
            "rx_call": qso.rx_info.callsign,
            "rx_rst": str(qso.rx_info.signal_report),
            "rx_exchange": qso.rx_info.exchange,
            "transmitter": qso.transmitter,
        }
        for qso in qsos
    ]
    df = pd.DataFrame(rows, columns=QSO_COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    df["transmitter"] = df["transmitter"].astype("int64")
    return df
