# housing_prep/consistency.py
"""
Consistency checks for groups of related predictors.

Several columns of the House Prices data describe the same amenity. For a
house without a basement, every basement quality column should be NA and
TotalBsmtSF should be 0. For each group we collect, per column, the Ids that
signal "no amenity" and compare the sets. Ids in some but not all of the sets
are inconsistent.

Repair assumes a single data-entry error: if an Id is in exactly one of the
sets, that column is set to NA and left to the later NA replacement. Ids
implicated by more than one column are reported and left alone.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import ID_COL
from .errors import MissingColumn

log = logging.getLogger(__name__)


class Signal(Enum):
    MISSING = "missing"
    ZERO = "zero"


@dataclass(frozen=True)
class NoAmenity:
    """Condition under which `column` says the amenity is absent."""
    column: str
    signal: Signal
    sentinels: Tuple[str, ...] = ()

    def mask(self, data: pd.DataFrame) -> pd.Series:
        values = data[self.column]
        if self.signal is Signal.ZERO:
            return values == 0
        m = values.isna()
        if self.sentinels:
            m = m | values.isin(self.sentinels)
        return m


@dataclass(frozen=True)
class RelatedGroup:
    name: str
    categorical: Tuple[str, ...]
    numeric: Tuple[str, ...] = ()
    # category values that also mean "no amenity", e.g. 'NB' once NAs are replaced
    sentinels: Tuple[str, ...] = ()

    @property
    def columns(self) -> List[str]:
        return list(self.categorical) + list(self.numeric)

    def conditions(self) -> List[NoAmenity]:
        conds = [NoAmenity(c, Signal.MISSING, tuple(self.sentinels)) for c in self.categorical]
        conds += [NoAmenity(c, Signal.ZERO) for c in self.numeric]
        return conds


BASEMENT = RelatedGroup(
    name="basement",
    categorical=("BsmtQual", "BsmtCond", "BsmtExposure",
                 "BsmtFinType1", "BsmtFinType2"),
    numeric=("TotalBsmtSF",),
)
GARAGE = RelatedGroup(
    name="garage",
    categorical=("GarageType", "GarageFinish", "GarageQual", "GarageCond"),
    numeric=("GarageArea", "GarageCars"),
)
FIREPLACE = RelatedGroup(
    name="fireplace",
    categorical=("FireplaceQu",),
    numeric=("Fireplaces",),
)
POOL = RelatedGroup(
    name="pool",
    categorical=("PoolQC",),
    numeric=("PoolArea",),
)

DEFAULT_GROUPS = [BASEMENT, GARAGE, FIREPLACE, POOL]


@dataclass
class GroupReport:
    name: str
    consistent: bool
    common_ids: List = field(default_factory=list)
    inconsistent_ids: List = field(default_factory=list)
    repaired: Dict = field(default_factory=dict)     # Id -> column set to NA
    unresolved: Dict = field(default_factory=dict)   # Id -> columns that disagree
    before: Optional[pd.DataFrame] = None
    after: Optional[pd.DataFrame] = None    # set by repair_group

    def summary(self) -> str:
        if self.consistent:
            return f"{self.name}: consistent ({len(self.common_ids)} rows without amenity)"
        return (f"{self.name}: {len(self.inconsistent_ids)} inconsistent rows, "
                f"{len(self.repaired)} repaired, {len(self.unresolved)} left for manual review")


def _validate(data: pd.DataFrame, group: RelatedGroup, id_col: str):
    missing = [c for c in [id_col] + group.columns if c not in data.columns]
    if missing:
        raise MissingColumn(missing)
    if data[id_col].duplicated().any():
        raise ValueError(f"'{id_col}' values must be unique")


def no_amenity_ids(data: pd.DataFrame, group: RelatedGroup, id_col: str = ID_COL) -> Dict[str, set]:
    """Per column, the set of Ids whose value signals no amenity."""
    ids = data[id_col]
    return {cond.column: set(ids[cond.mask(data)]) for cond in group.conditions()}


def _audit_rows(data: pd.DataFrame, id_col: str, ids) -> pd.DataFrame:
    return data.loc[data[id_col].isin(ids)].copy()


def check_group(data: pd.DataFrame, group: RelatedGroup, id_col: str = ID_COL) -> GroupReport:
    """Find inconsistent rows of a group without modifying the data.

    `before` holds the full inconsistent rows; `after` stays None until
    repair_group applies the repairs.
    """
    _validate(data, group, id_col)
    id_sets = no_amenity_ids(data, group, id_col)
    sets = list(id_sets.values())

    if all(s == sets[0] for s in sets[1:]):
        common = sorted(sets[0]) if sets else []
        return GroupReport(group.name, True, common_ids=common)

    common = set.intersection(*sets)
    inconsistent = sorted(set.union(*sets) - common)

    repaired, unresolved = {}, {}
    for row_id in inconsistent:
        flagged = [col for col, s in id_sets.items() if row_id in s]
        if len(flagged) == 1:
            repaired[row_id] = flagged[0]
        else:
            unresolved[row_id] = flagged

    before = _audit_rows(data, id_col, inconsistent)
    return GroupReport(
        group.name, False,
        common_ids=sorted(common),
        inconsistent_ids=inconsistent,
        repaired=repaired,
        unresolved=unresolved,
        before=before,
    )


def repair_group(data: pd.DataFrame, group: RelatedGroup,
                 id_col: str = ID_COL) -> Tuple[pd.DataFrame, GroupReport]:
    """Set the single dissenting column to NA for each repairable row.

    Returns the repaired copy of `data` and the report, whose `after` holds the
    audited rows once repaired.
    """
    report = check_group(data, group, id_col)
    if report.consistent:
        log.info(report.summary())
        return data.copy(), report

    out = data.copy()
    for row_id, col in report.repaired.items():
        if pd.api.types.is_integer_dtype(out[col]) or pd.api.types.is_bool_dtype(out[col]):
            out[col] = out[col].astype(float)
        out.loc[out[id_col] == row_id, col] = np.nan

    report.after = _audit_rows(out, id_col, report.inconsistent_ids)

    log.warning(report.summary())
    log.info("%s rows before repair:\n%s", group.name, report.before.to_string(index=False))
    log.info("%s rows after repair:\n%s", group.name, report.after.to_string(index=False))
    for row_id, cols in report.unresolved.items():
        log.warning("%s: %s=%s flagged by %s, not repaired", group.name, id_col, row_id, cols)
    return out, report


def repair_all(data: pd.DataFrame, groups: Optional[List[RelatedGroup]] = None,
               id_col: str = ID_COL) -> Tuple[pd.DataFrame, List[GroupReport]]:
    """Run repair_group for each group in turn (default: basement, garage, fireplace, pool)."""
    if groups is None:
        groups = DEFAULT_GROUPS
    reports = []
    for group in groups:
        data, report = repair_group(data, group, id_col)
        reports.append(report)
    return data, reports
