# housing_prep/errors.py


class HousingPrepError(Exception):
    """Base class for errors raised by housing_prep."""


class UnknownVariable(HousingPrepError, LookupError):
    """Encodings were requested for a variable that was never encoded."""

    def __init__(self, variable_name: str):
        super().__init__(
            f"No encodings stored for '{variable_name}'. "
            f"Encode it on the training data first."
        )
        self.variable_name = variable_name


class InvalidMethod(HousingPrepError, ValueError):
    def __init__(self, method, allowed):
        super().__init__(
            f"Unrecognized encoding method {method!r}; expected one of {list(allowed)}."
        )
        self.method = method


class MissingColumn(HousingPrepError, LookupError):
    def __init__(self, columns):
        if isinstance(columns, str):
            columns = [columns]
        self.columns = list(columns)
        super().__init__(f"Column(s) not found in data: {self.columns}")


class InvalidTarget(HousingPrepError, ValueError):
    """Target column is not numeric or has missing values."""
