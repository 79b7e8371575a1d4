"""Exceptions raised while loading a taxonomy or compiling its identifier space."""


class TaxonomyError(ValueError):
    """Taxonomy source is unusable."""


class TaxonomyFormatError(TaxonomyError):
    """Taxonomy document has a missing field or the wrong shape."""

    def __init__(self, source: str, location: str, message: str) -> None:
        self.source = source
        self.location = location
        super().__init__(f"Invalid taxonomy in {source} at '{location}': {message}")


class GenerationError(RuntimeError):
    """Fatal error that aborts generation before any artifact is written."""


class SymbolCollisionError(GenerationError):
    """Two distinct taxonomy nodes normalize to the same symbolic name."""

    def __init__(self, symbol: str, first_id: str, second_id: str) -> None:
        self.symbol = symbol
        self.first_id = first_id
        self.second_id = second_id
        super().__init__(
            f"Symbolic name collision: ids {first_id!r} and {second_id!r} both normalize to {symbol!r}"
        )


class InvalidSymbolError(GenerationError):
    """An id normalizes to a name that cannot be an enum member."""

    def __init__(self, source_id: str, symbol: str, reason: str) -> None:
        self.source_id = source_id
        self.symbol = symbol
        super().__init__(f"Id {source_id!r} normalizes to invalid symbol {symbol!r}: {reason}")


class IdentifierSpaceOverflowError(GenerationError):
    """Identifier space has more members than the compact encoding can index."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Identifier space has {size} members; compact encoding supports at most {limit}")
