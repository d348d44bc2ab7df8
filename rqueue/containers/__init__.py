from .linked_deque import Deque
from .randomized_queue import RandomizedQueue
from .resize import MIN_CAPACITY
