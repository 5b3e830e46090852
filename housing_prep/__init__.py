from .consistency import GroupReport, RelatedGroup, check_group, repair_all, repair_group
from .encoding import EncodingStore, assign_encoding, encode
from .errors import InvalidMethod, InvalidTarget, MissingColumn, UnknownVariable
from .folds import make_folds
from .smoothing import sigmoid

__all__ = [
    "EncodingStore", "encode", "assign_encoding", "sigmoid", "make_folds",
    "RelatedGroup", "GroupReport", "check_group", "repair_group", "repair_all",
    "UnknownVariable", "InvalidMethod", "MissingColumn", "InvalidTarget",
]
