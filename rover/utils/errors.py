# IN THIS FILE: ROVER DOMAIN ERRORS


class RoverError(ValueError):
    """Base class for malformed rover input. Service maps it to HTTP 400."""


class InvalidStartFormat(RoverError):
    """Start string does not match '<x> <y> <N|E|S|W>'."""

    def __init__(self, text):
        self.text = text
        super().__init__(
            f"Invalid start string {text!r}: expected '<x> <y> <N|E|S|W>'"
        )


class InvalidInstructionFormat(RoverError):
    """Instruction string contains something other than L, R or M."""

    def __init__(self, text):
        self.text = text
        super().__init__(
            f"Invalid instruction string {text!r}: only L, R and M are allowed"
        )


class InvalidPath(RoverError):
    """Two consecutive path states are not one command apart."""

    def __init__(self, index: int, previous, current):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(
            f"Cannot reach {current} from {previous} with single commands "
            f"(path index {index})"
        )
