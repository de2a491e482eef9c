from __future__ import annotations

import random
import string
from typing import Optional

_ALPHABET = string.digits + string.ascii_lowercase


def new_id(rng: Optional[random.Random] = None, *, length: int = 9) -> str:
    """Short random base-36 identifier.

    Collisions are not checked; at this data size they are not a concern.
    """
    rng = rng or random
    return "".join(rng.choice(_ALPHABET) for _ in range(length))
