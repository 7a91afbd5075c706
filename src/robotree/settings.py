from attrs import field, frozen, validators


@frozen
class ParserSettings:
    """Options controlling how `CommandParser` reads a command sequence.

    Attributes:
        max_depth: Maximum number of nested REPEAT blocks, or None for no limit.
        ignore_case: Accept keywords in any letter case (`forward`, `Repeat 3`).
    """

    max_depth: int | None = field(
        default=None, validator=validators.optional(validators.ge(1))
    )
    ignore_case: bool = False

    def allows_depth(self, depth: int) -> bool:
        """Check whether a block opened at `depth` is within the nesting limit."""
        return self.max_depth is None or depth <= self.max_depth
