"""Error taxonomy for reaction-info commands."""


class RinfoError(Exception):
    """Base class for every failure a command can surface to the user"""
    pass


class IdentifierError(RinfoError):
    """Raised when a message reference cannot be parsed"""
    pass


class AmbiguousIdentifier(IdentifierError):
    """A bare numeric ID was given without channel context"""
    pass


class InvalidFormat(IdentifierError):
    """The input is neither a message ID nor a message URL"""
    pass


class FetchFailure(RinfoError):
    """Network or API error while retrieving a message or its reactions"""
    pass


class DecodeFailure(RinfoError):
    """The fetched payload could not be read as a message"""
    pass


class SendFailure(RinfoError):
    """Submitting the reply itself failed"""
    pass
