"""Example script: enumeration of the unique components of a rank-3 Hermite
tensor in three dimensions, with the size of each equivalence class.

Run with
    python examples/hermite_tensor.py
"""

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from hptensor import HT, HTC, SVHP
from hptensor.utils.log_config import logger


def main() -> None:
    logger.info("He_4(y) = %s", SVHP(4, axis=2))
    logger.info("H_4(y)  = %s", SVHP(4, axis=2, probabilist=False))

    H = HT(3, dimension=3)
    total = 0
    for key, (val, eq_set) in H.items():
        total += len(eq_set)
        logger.info("H_%s = %s  (%d ordered indices)", key, val, len(eq_set))
    logger.info("%d unique components cover %d ordered indices", len(H), total)

    # Permuted indices select the same component
    assert HTC("zyx", dimension=3) == H["xyz"].val


if __name__ == "__main__":
    main()
