class ChartTypeMismatchError(TypeError):
    """A construct request named a type token the chart does not declare"""

    def __init__(self, typ: str, expected: str):
        super().__init__(f"unknown resource type {typ}; expected {expected}")
        self.typ = typ
        self.expected = expected


class ChartArgsError(ValueError):
    """The input bag of a construct request does not fit the chart's args"""
