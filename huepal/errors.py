"""Exceptions and warnings raised while building palettes."""


class HuePalError(ValueError):
    """Base class for palette construction errors."""


class InvalidArgument(HuePalError):
    """Arguments are missing or inconsistent (e.g. neither `names` nor `n`)."""


class MissingColumn(HuePalError):
    def __init__(self, column):
        self.column = column
        super().__init__(f'"{column}" is not a column in the data frame')


class InsufficientHues(HuePalError):
    def __init__(self, column, n_groups: int, n_hues: int):
        self.column = column
        self.n_groups = n_groups
        self.n_hues = n_hues
        super().__init__(
            f"Fewer hues provided than unique values in grouping variable:"
            f"\n - Grouping variable '{column}' has {n_groups} levels"
            f"\n - Only {n_hues} hues were provided"
        )


class NameCollisionWarning(UserWarning):
    """Same shade name produced under more than one group; last group wins."""


__all__ = [
    "HuePalError",
    "InvalidArgument",
    "MissingColumn",
    "InsufficientHues",
    "NameCollisionWarning",
]
