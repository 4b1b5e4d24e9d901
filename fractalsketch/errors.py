"""Error types raised by geometry primitives and subdivision rules."""


class FractalError(Exception):
    """Base class for every failure the fractal core reports."""


class DegenerateGeometryError(FractalError):
    """A zero-length line was asked for a direction or a rescale."""


class MalformedShapeError(FractalError):
    """A shape has a vertex count its subdivision rule does not expect,
    or a rule produced the wrong number of children for one parent."""

    def __init__(self, shape_name: str, expected: int, actual: int, what: str = "points") -> None:
        super().__init__(f"{shape_name} needs {expected} {what}, got {actual}")
        self.shape_name = shape_name
        self.expected = expected
        self.actual = actual
