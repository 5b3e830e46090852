import numpy as np
import pandas as pd
import pytest

from housing_prep.preprocess import (
    clean_ms_zoning, preprocess, read_data, replace_na_sentinels, write_data,
)


def test_na_levels_replaced():
    df = pd.DataFrame({
        "BsmtQual": ["Gd", np.nan],
        "FireplaceQu": [np.nan, "TA"],
        "Alley": [np.nan, "Grvl"],
        "LotFrontage": [np.nan, 60.0],
    })
    out = replace_na_sentinels(df)
    assert out["BsmtQual"].tolist() == ["Gd", "NB"]
    assert out["FireplaceQu"].tolist() == ["No", "TA"]
    assert out["Alley"].tolist() == ["None", "Grvl"]
    # not a sentinel column
    assert pd.isna(out.loc[0, "LotFrontage"])
    assert pd.isna(df.loc[1, "BsmtQual"])


def test_ms_zoning_cleaned():
    df = pd.DataFrame({"MSZoning": ["C (all)", "RL", "RM"]})
    assert clean_ms_zoning(df)["MSZoning"].tolist() == ["C", "RL", "RM"]
    # frames without the column pass through
    assert clean_ms_zoning(pd.DataFrame({"x": [1]})).columns.tolist() == ["x"]


def test_preprocess(houses):
    out = preprocess(houses)
    assert out["BsmtQual"].isna().sum() == 0
    assert set(out["PoolQC"]) == {"Ex", "No"}
    assert "C (all)" not in set(out["MSZoning"])


def test_read_only_na_string_is_missing(tmp_path):
    path = tmp_path / "train.csv"
    path.write_text("Id,Alley,Note\n1,NA,\n2,Grvl,x\n")
    df = read_data(path)
    assert pd.isna(df.loc[0, "Alley"])
    assert df.loc[0, "Note"] == ""


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data(tmp_path / "nope.csv")


def test_write_creates_directory(tmp_path, houses):
    path = tmp_path / "out" / "train.csv"
    write_data(houses, path)
    assert path.exists()
    assert len(pd.read_csv(path)) == len(houses)
