class InvalidArgumentError(ValueError):
    """None was passed to an insertion operation"""


class EmptyContainerError(IndexError):
    """Removal or sampling on an empty container"""


class UnsupportedOperationError(NotImplementedError):
    """Removal through an iterator"""


def ensure_item(item, where: str) -> None:
    if item is None:
        raise InvalidArgumentError("[{}] None is not allowed".format(where))
