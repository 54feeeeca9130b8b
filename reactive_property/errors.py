class InvalidArgumentError(TypeError):
    """
    Raised when a property, its setter or `on` is called with the wrong
    number or kind of arguments.
    """

    pass


class NoDefaultError(AttributeError):
    """
    Raised when the default of a property is requested while the
    property was constructed without one.
    """

    pass


class WrongNumberOfArgumentsError(TypeError):
    """
    Error that is used to signal that the wrong number of arguments is
    used for the callback
    """

    pass
