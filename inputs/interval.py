from dataclasses import dataclass
from custom_types.types import as_float, is_finite


@dataclass(frozen=True)
class Interval:
    lower: float    # left endpoint
    upper: float    # right endpoint

    def __post_init__(self):
        """Validate that the endpoints are finite and ordered"""
        lower = as_float(self.lower)
        upper = as_float(self.upper)

        if not (is_finite(lower) and is_finite(upper)):
            raise ValueError(
                f"Interval endpoints must be finite. Found: lower={lower}, upper={upper}"
            )
        if lower > upper:
            raise ValueError(
                f"Invalid interval: lower={lower} > upper={upper} (must be lower <= upper)."
            )

        # normalise to float so ints and numpy scalars behave identically
        object.__setattr__(self, 'lower', lower)
        object.__setattr__(self, 'upper', upper)

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2
