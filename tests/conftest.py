import numpy as np
import pandas as pd
import pytest


def make_houses(n=20, with_target=True):
    """Small House Prices style frame whose amenity groups are all consistent."""
    rows = []
    for i in range(n):
        bsmt = i % 5 != 0
        garage = i % 6 != 0
        fireplace = i % 2 == 0
        pool = i == 3
        row = {
            "Id": i + 1,
            "MSZoning": "C (all)" if i % 7 == 0 else "RL",
            "Neighborhood": ["NAmes", "CollgCr", "OldTown"][i % 3],
            "BsmtQual": "Gd" if bsmt else np.nan,
            "BsmtCond": "TA" if bsmt else np.nan,
            "BsmtExposure": "No" if bsmt else np.nan,
            "BsmtFinType1": "GLQ" if bsmt else np.nan,
            "BsmtFinType2": "Unf" if bsmt else np.nan,
            "TotalBsmtSF": 800 if bsmt else 0,
            "GarageType": "Attchd" if garage else np.nan,
            "GarageFinish": "RFn" if garage else np.nan,
            "GarageQual": "TA" if garage else np.nan,
            "GarageCond": "TA" if garage else np.nan,
            "GarageArea": 400 if garage else 0,
            "GarageCars": 2 if garage else 0,
            "FireplaceQu": "Gd" if fireplace else np.nan,
            "Fireplaces": 1 if fireplace else 0,
            "PoolQC": "Ex" if pool else np.nan,
            "PoolArea": 500 if pool else 0,
        }
        if with_target:
            row["SalePrice"] = 100000.0 + 5000.0 * i
        rows.append(row)
    return pd.DataFrame(rows)


@pytest.fixture
def houses():
    return make_houses()


@pytest.fixture
def encode_frame():
    """20 rows, 3 categories plus 2 NAs, distinct sale prices."""
    cats = ["A"] * 8 + ["B"] * 6 + ["C"] * 4 + [np.nan] * 2
    prices = [
        120000, 135000, 128000, 150000, 142000, 131000, 125000, 139000,
        210000, 225000, 198000, 240000, 215000, 205000,
        90000, 85000, 99000, 92000,
        160000, 175000,
    ]
    return pd.DataFrame({
        "Id": range(1, 21),
        "Cat": cats,
        "SalePrice": np.array(prices, dtype=float),
    })
