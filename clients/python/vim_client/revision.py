# Copyright 2026 vim-client Contributors
# SPDX-License-Identifier: Apache-2.0
"""Protocol revision ordering and negotiation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import InvalidRevisionError

DEFAULT_REVISION = "4.0"
REVISION_CEILING = "5.0"

_REVISION_RE = re.compile(r"^\d+(\.\d+)*$")


@dataclass(frozen=True, order=True)
class Revision:
    """A dotted protocol revision such as ``5.0`` or ``6.7.3``.

    Ordering compares the numeric components, padding the shorter revision
    with zeros, so ``5.0 == 5.0.0`` and ``4.10 > 4.9``.
    """

    key: tuple[int, ...] = field(repr=False)
    text: str = field(compare=False)

    @classmethod
    def parse(cls, value: str | Revision) -> Revision:
        if isinstance(value, Revision):
            return value
        text = str(value).strip()
        if not _REVISION_RE.match(text):
            raise InvalidRevisionError(f"Invalid protocol revision: {value!r}")
        parts = [int(p) for p in text.split(".")]
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return cls(key=tuple(parts), text=text)

    def __str__(self) -> str:
        return self.text


def negotiate(advertised: str, ceiling: str = REVISION_CEILING) -> str:
    """Pick the revision to speak with a server advertising ``advertised``.

    Never goes above the client ceiling.
    """
    return str(min(Revision.parse(advertised), Revision.parse(ceiling)))
