"""Errors raised by the verb conjugation engine."""


class ConjugationError(ValueError):
    """Base class for all verb classification/conjugation errors."""


class InvalidInput(ConjugationError):
    """Raised when the verb string is empty."""

    def __init__(self, message: str = "Verb must not be empty"):
        super().__init__(message)


class UnknownGodanEnding(ConjugationError):
    """Raised when a godan verb ends in a mora with no conjugation row."""

    def __init__(self, ending: str):
        self.ending = ending
        super().__init__(f"Unknown godan verb ending: {ending}")


class MalformedIchidanVerb(ConjugationError):
    """Raised when an ichidan verb does not end in る."""

    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"Ichidan verb must end in る: {verb}")


class MalformedSuruVerb(ConjugationError):
    """Raised when a suru verb is neither する nor a ~する compound."""

    def __init__(self, verb: str):
        self.verb = verb
        super().__init__(f"Invalid suru verb: {verb}")
