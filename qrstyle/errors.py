"""Error kinds raised while resolving a style or rendering a symbol."""


class StyleError(ValueError):
    """Base class for every qrstyle failure."""


class InvalidColor(StyleError):
    """A colour is not '#' followed by 3 or 6 hex digits."""

    def __init__(self, value):
        super().__init__(f"Invalid colour {value!r}: expected '#rgb' or '#rrggbb'")
        self.value = value


class InvalidGradientArity(StyleError):
    """A gradient does not name exactly two colours."""

    def __init__(self, count: int):
        super().__init__(f"Gradient must have exactly 2 colours, got {count}")
        self.count = count


class InvalidLogoRatio(StyleError):
    def __init__(self, ratio: float, low: float, high: float):
        super().__init__(f"Logo size ratio {ratio} outside [{low}, {high}]")
        self.ratio = ratio


class InvalidStyle(StyleError):
    def __init__(self, kind: str, value: str, choices):
        super().__init__(f"Unknown {kind} style {value!r}; choose from {', '.join(choices)}")
        self.value = value


class InvalidDimension(StyleError):
    """Image size or border cannot produce a drawable symbol."""


class InvalidMatrixSize(StyleError):
    """The module matrix is not a valid QR symbol shape.

    Matrices come from the encoder, so this signals a bug upstream rather
    than bad user input.
    """


class LogoDecodeFailure(StyleError):
    """The logo file could not be opened or decoded."""


class InvalidVersion(StyleError):
    """An explicit QR version outside 1-40."""

    def __init__(self, version):
        super().__init__(f"QR version must be between 1 and 40, got {version!r}")
        self.version = version
