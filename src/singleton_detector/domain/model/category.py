"""Classification categories reported by detection engines."""

from enum import Enum


class Category(Enum):
    """Category a detection engine assigns to a class.

    Semantics belong to the engine's classifier. The driver only uses
    them to decide what the flags hide.
    """

    SINGLETON = "singleton"
    HINGLETON = "hingleton"  # helper singleton
    MINGLETON = "mingleton"  # mutable singleton
    FINGLETON = "fingleton"  # static field singleton
    OTHER = "other"
