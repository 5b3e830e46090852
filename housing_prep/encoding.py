# housing_prep/encoding.py
"""
K-fold target encoding of categorical variables.

For each of the k folds, a category's encoding is a weighted average of its
out-of-fold mean target and the mean of the target over the training data.
The weight comes from `sigmoid(count, sigmoid_center)`, so categories seen
only a few times outside the fold stay close to the global mean. Every
training row gets the value of its own fold, which never uses that row's
target.

The k values per category are kept in an EncodingStore. Test data is then
encoded in one of two ways:

1. 'random': each row picks one of the k encodings of its category at random.
2. 'mean':   each row gets the mean of the k encodings of its category. This
   is the natural choice for a linear model, since it is what many runs of
   'random' give on average.
"""

import logging
from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from .config import (
    ENCODED_SUFFIX, ENCODING_METHODS, MISSING_CATEGORY, N_SPLITS,
    SIGMOID_CENTER, TARGET,
)
from .errors import InvalidMethod, InvalidTarget, MissingColumn, UnknownVariable
from .folds import fold_ids, make_folds
from .smoothing import sigmoid

log = logging.getLogger(__name__)


class EncodingStore:
    """Per-variable encoding tables: category rows x one column per fold."""

    def __init__(self):
        self._tables: Dict[str, pd.DataFrame] = {}

    def put(self, variable_name: str, table: pd.DataFrame):
        if variable_name in self._tables:
            log.warning("Replacing stored encodings for '%s'", variable_name)
        self._tables[variable_name] = table.copy()

    def get(self, variable_name: str) -> pd.DataFrame:
        try:
            return self._tables[variable_name]
        except KeyError:
            raise UnknownVariable(variable_name) from None

    @property
    def variables(self) -> List[str]:
        return list(self._tables)

    def __contains__(self, variable_name) -> bool:
        return variable_name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self):
        return f"EncodingStore(variables={self.variables})"


def encoded_name(variable_name: str) -> str:
    return f"{variable_name}{ENCODED_SUFFIX}"


def category_labels(values: pd.Series) -> pd.Series:
    """String category labels with NA replaced by the 'missing' category."""
    s = values.copy()
    # Integer codes read as float because of NAs should match their int form
    if pd.api.types.is_float_dtype(s) and (s.dropna() % 1 == 0).all():
        s = s.astype("Int64")
    s = s.astype(object)
    return s.where(s.notna(), MISSING_CATEGORY).astype(str)


def _check_target(data: pd.DataFrame, target: str) -> pd.Series:
    y = data[target]
    if not pd.api.types.is_numeric_dtype(y) or pd.api.types.is_bool_dtype(y):
        raise InvalidTarget(f"Target column '{target}' must be numeric, got {y.dtype}")
    if y.isna().any():
        raise InvalidTarget(f"Target column '{target}' has {int(y.isna().sum())} missing values")
    return y.astype(float)


def encode(data: pd.DataFrame, variable_name: str, target_mean: Optional[float],
           store: EncodingStore, k: int = N_SPLITS,
           sigmoid_center: float = SIGMOID_CENTER, seed: Optional[int] = None,
           target: str = TARGET) -> pd.DataFrame:
    """K-fold target encode one categorical column of the training data.

    Returns a copy of `data` with the column `<variable_name>Num` added and
    stores the k encodings per category in `store` under `variable_name`.
    `target_mean` defaults to the mean of the target column when None.
    """
    missing = [c for c in (variable_name, target) if c not in data.columns]
    if missing:
        raise MissingColumn(missing)
    y = _check_target(data, target)
    if target_mean is None:
        target_mean = float(y.mean())

    to_encode = pd.DataFrame({
        "category": category_labels(data[variable_name]).to_numpy(),
        "target": y.to_numpy(),
    })
    categories = pd.Index(pd.unique(to_encode["category"]), name="category")
    n_rows = len(to_encode)

    folds = make_folds(to_encode["category"], k=k, seed=seed)
    encoded = np.full(n_rows, np.nan)
    k_fold_encodings = pd.DataFrame(index=categories)

    fold_of = fold_ids(folds, n_rows)
    for index, fold in enumerate(folds, 1):
        in_fold = fold_of == index - 1

        stats = (
            to_encode[~in_fold]
            .groupby("category")["target"]
            .agg(out_of_fold_mean="mean", count="count")
            .reindex(categories)
            .fillna({"out_of_fold_mean": 0.0, "count": 0})
        )
        weight = sigmoid(stats["count"].to_numpy(), sigmoid_center)
        value = pd.Series(
            weight * stats["out_of_fold_mean"].to_numpy() + (1 - weight) * target_mean,
            index=categories,
        )
        if MISSING_CATEGORY in value.index:
            value.loc[MISSING_CATEGORY] = target_mean

        k_fold_encodings[f"Fold{index}"] = value
        encoded[fold] = value.reindex(to_encode["category"].iloc[fold]).to_numpy()

    store.put(variable_name, k_fold_encodings)
    log.info("Encoded '%s': %d categories x %d folds (center=%s)",
             variable_name, len(categories), len(folds), sigmoid_center)

    out = data.copy()
    out[encoded_name(variable_name)] = encoded
    return out


def assign_encoding(data: pd.DataFrame, variable_name: str, target_mean: float,
                    store: EncodingStore, method: str = "mean",
                    seed: Optional[int] = None) -> pd.DataFrame:
    """Encode a variable of held-out data from the stored k-fold encodings.

    Categories never seen in training get `target_mean`.
    """
    if method not in ENCODING_METHODS:
        raise InvalidMethod(method, ENCODING_METHODS)
    encoding = store.get(variable_name)
    if variable_name not in data.columns:
        raise MissingColumn(variable_name)

    to_encode = category_labels(data[variable_name])
    if method == "random":
        rng = np.random.default_rng(seed)
        values = encoding.reindex(to_encode).to_numpy(dtype=float)
        column_selection = rng.integers(values.shape[1], size=len(to_encode))
        encoded_data = values[np.arange(len(to_encode)), column_selection]
    else:
        encoded_data = encoding.mean(axis=1).reindex(to_encode).to_numpy(dtype=float)

    unseen = np.isnan(encoded_data)
    if unseen.any():
        log.info("'%s': %d rows with unseen categories set to the target mean",
                 variable_name, int(unseen.sum()))
    out = data.copy()
    out[encoded_name(variable_name)] = np.where(unseen, target_mean, encoded_data)
    return out


def encode_columns(data: pd.DataFrame, columns: Iterable[str], target_mean: Optional[float],
                   store: EncodingStore, **kwargs) -> pd.DataFrame:
    for col in columns:
        data = encode(data, col, target_mean, store, **kwargs)
    return data


def assign_columns(data: pd.DataFrame, columns: Iterable[str], target_mean: float,
                   store: EncodingStore, method: str = "mean",
                   seed: Optional[int] = None) -> pd.DataFrame:
    columns = list(columns)
    # independent draws per column from a single seed
    seeds = np.random.SeedSequence(seed).spawn(len(columns)) if seed is not None else None
    for i, col in enumerate(columns):
        col_seed = None if seeds is None else int(seeds[i].generate_state(1)[0])
        data = assign_encoding(data, col, target_mean, store, method=method, seed=col_seed)
    return data
