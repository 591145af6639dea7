class BeamAnalysisError(Exception):
    """Base class of all errors raised by the beam analysis."""


class UnsupportedConditionError(BeamAnalysisError, ValueError):
    """No analyzer is registered for the requested support condition."""

    def __init__(self, condition, supported=()):
        self.condition = condition
        self.supported = tuple(supported)
        message = f'Unsupported condition {condition!r}.'
        if self.supported:
            message += f' Supported conditions: {", ".join(self.supported)}.'
        super().__init__(message)


class InvalidGeometryError(BeamAnalysisError, ValueError):
    """The beam geometry cannot be analysed (e.g. a span of zero length)."""


class InvalidMaterialError(BeamAnalysisError, ValueError):
    """The material lacks a property required by the analysis."""
