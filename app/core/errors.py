class HealthCalculationError(Exception):
    """Base class for every failure raised by the calculation engine."""


class MissingInputError(HealthCalculationError, ValueError):
    """A required physiological input (weight, height, age, gender) is absent or zero."""

    def __init__(self, field: str, calculation: str):
        self.field = field
        self.calculation = calculation
        label = field.replace("_", " ")
        label = label[:1].upper() + label[1:]
        super().__init__(
            f"{label} is required for {calculation} calculation. Please complete your profile."
        )


class DerivedCalculationError(HealthCalculationError):
    """A collaborator calculation failed; the original exception is chained as __cause__."""

    def __init__(self, calculation: str, reason: str):
        self.calculation = calculation
        super().__init__(f"{calculation} calculation failed: {reason}")


class InvalidTimeError(HealthCalculationError, ValueError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time {value!r}, expected HH:MM")
