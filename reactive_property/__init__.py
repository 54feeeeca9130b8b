from importlib.metadata import version

__version__ = version("reactive-property")


from .errors import InvalidArgumentError, NoDefaultError, WrongNumberOfArgumentsError
from .listener import Listener
from .property import ReactiveProperty, reactive_property
