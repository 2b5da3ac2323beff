import math

import click


class MinFloat(click.ParamType):
    name = "minfloat"

    def __init__(self, min_value):
        self.min_value = min_value

    def convert(self, value, param, ctx):
        try:
            fvalue = float(value)
        except ValueError:
            self.fail(f"{value} is not a valid number", param, ctx)
        if not math.isfinite(fvalue):
            self.fail(f"{value} is not a finite number", param, ctx)
        if fvalue <= self.min_value:
            self.fail(f"{value} must be greater than {self.min_value}", param, ctx)
        return fvalue


class ConstructorArgument(click.ParamType):
    """Integers are converted; anything else is left to ape's converters."""

    name = "constructor_argument"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return int(value, 10)
        except ValueError:
            return value
