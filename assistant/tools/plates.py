from __future__ import annotations

import re
from typing import Optional


# Common Dutch plate layouts, matched after hyphens are stripped.
LICENSE_PLATE_RE = re.compile(
    r"\b\d?[A-Za-z]{1,3}-?\d{1,3}-?[A-Za-z]{0,2}\b"
    r"|\b[A-Za-z]{2}\d{2}[A-Za-z]{2}\b"
    r"|\b\d{1,2}-?[A-Za-z]{1,3}-?\d{1,2}\b",
    re.ASCII,
)


def find_license_plate(text: str) -> Optional[str]:
    """Return the first plate-like token in ``text``, uppercased and without hyphens.

    Best-effort: any token with the right shape is accepted, real plate or not.
    """
    cleaned = (text or "").replace("-", "")
    match = LICENSE_PLATE_RE.search(cleaned)
    if not match:
        return None
    return match.group(0).upper()
