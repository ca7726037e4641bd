from enum import Enum
from typing import FrozenSet


class ContainerOperation(str, Enum):
    """Public operations exposed by a dependency container.

    Their names cannot be used as dependency names, and none of them may be
    invoked through the context handed to a factory.
    """

    ADD = "add"
    UPDATE = "update"
    GET = "get"
    HAS = "has"
    EXTEND = "extend"
    MERGE = "merge"
    CLONE = "clone"
    NAMES = "names"
    GET_REGISTRY_COPY = "get_registry_copy"
    GET_CACHE_COPY = "get_cache_copy"

    def __str__(self) -> str:
        return self.value


RESERVED_NAMES: FrozenSet[str] = frozenset(operation.value for operation in ContainerOperation)
