"""
Custom exceptions for the algorithms package.
"""

class HptensorError(Exception):
    """Base exception for hptensor errors.
    
    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class DomainError(HptensorError, ValueError):
    """Raised when a numeric argument lies outside its valid domain.
    
    Parameters
    ----------
    message : str
        The error message, naming the argument and its valid domain.
    """

    def __init__(self, message: str):
        super().__init__(message)


class BackendError(HptensorError):
    """Raised when an exception occurs in an algebra backend.
    
    Parameters
    ----------
    message : str
        The error message.
    """
    
    def __init__(self, message: str):
        super().__init__(message)
