import random
import uuid
from typing import Literal

ID_PREFIX = "chat.completion-"

IdStrategy = Literal["uuid", "random"]

# Seeded once from OS entropy; never reseeded per call.
_rng = random.Random()


def random_hex_id() -> str:
    """Return a prefixed random 63-bit integer in lowercase hex."""
    return f"{ID_PREFIX}{_rng.getrandbits(63):x}"


def uuid_id() -> str:
    """Return a prefixed random UUID in its canonical form."""
    return f"{ID_PREFIX}{uuid.uuid4()}"


def new_completion_id(strategy: IdStrategy = "uuid") -> str:
    """Generate a practically unique completion id using the given strategy."""
    if strategy == "random":
        return random_hex_id()
    return uuid_id()
