# housing_prep/config.py
SEED = 42
N_SPLITS = 5
SIGMOID_CENTER = 5

TARGET = "SalePrice"
ID_COL = "Id"

# Category used for NA while encoding; always encoded to the target mean
MISSING_CATEGORY = "missing"
ENCODED_SUFFIX = "Num"
ENCODING_METHODS = ("random", "mean")

# NA is a valid level for these columns (see the data description)
NA_TO_NO_COLS = [
    "FireplaceQu", "GarageFinish", "GarageQual", "GarageCond", "PoolQC",
    "Fence",
]
NA_TO_NB_COLS = [
    "BsmtQual", "BsmtCond", "BsmtExposure", "BsmtFinType1", "BsmtFinType2",
]
NA_TO_NONE_COLS = ["Alley", "GarageType", "MiscFeature"]

# High-cardinality nominals worth target encoding
ENCODED_COLS = [
    "Neighborhood", "Exterior1st", "Exterior2nd", "MSSubClass", "Condition1",
    "SaleType",
]
