from .config import Config
from .containers import Deque, RandomizedQueue
from .errors import EmptyContainerError, InvalidArgumentError, UnsupportedOperationError

__version__ = "0.1.0"
