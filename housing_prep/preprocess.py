# housing_prep/preprocess.py
"""
Preprocess the training and test data.

Read with only the unquoted string NA as missing, so empty strings survive
and NA can be found with isna. From the data description NA is a valid value
for several categorical columns; those are replaced by explicit levels such
as 'NB' for 'No Basement'.
"""

import logging
from pathlib import Path

import pandas as pd

from .config import NA_TO_NB_COLS, NA_TO_NO_COLS, NA_TO_NONE_COLS

log = logging.getLogger(__name__)

NA_REPLACEMENTS = (
    (NA_TO_NO_COLS, "No"),
    (NA_TO_NB_COLS, "NB"),
    (NA_TO_NONE_COLS, "None"),
)


def read_data(path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"'{path}' not found. Put the Kaggle csv files under data/.")
    return pd.read_csv(path, keep_default_na=False, na_values=["NA"])


def write_data(data: pd.DataFrame, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data.to_csv(path, index=False)
    log.info("Saved %s %s", path, data.shape)


def replace_na_sentinels(data: pd.DataFrame) -> pd.DataFrame:
    data = data.copy()
    for cols, replacement in NA_REPLACEMENTS:
        for col in cols:
            if col in data.columns:
                data[col] = data[col].fillna(replacement)
    return data


def clean_ms_zoning(data: pd.DataFrame) -> pd.DataFrame:
    """The data description just uses 'C'; 'C (all)' is distracting in legends."""
    data = data.copy()
    if "MSZoning" in data.columns:
        data["MSZoning"] = data["MSZoning"].replace("C (all)", "C")
    return data


def preprocess(data: pd.DataFrame) -> pd.DataFrame:
    return clean_ms_zoning(replace_na_sentinels(data))
