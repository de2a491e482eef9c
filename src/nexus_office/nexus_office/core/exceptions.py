class DomainError(Exception):
    """Base for office workflow failures; controllers map these to 4xx replies."""


class ValidationError(DomainError):
    """Bad input, or a precondition such as "checked in today" does not hold."""


class AuthenticationError(DomainError):
    """Unknown email or wrong credential at sign-in."""


class AuthorizationError(DomainError):
    """The signed-in role may not perform the action (e.g. deciding leave)."""
