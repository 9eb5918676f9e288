"""Assemble a complete legal description from metadata and segments."""
import logging
from typing import NamedTuple, Sequence

from .constants import THREAD_EXIT_TANGENTS
from .direction import Direction
from .segments import Segment

logger = logging.getLogger(__name__)


def fmt_area(area: float) -> str:
    """Area without a trailing .0 on whole values: 100.0 -> '100', 0.25 -> '0.25'."""
    if float(area).is_integer() and abs(area) < 1e21:
        return str(int(area))
    return repr(float(area))


def drop_last_semicolon(text: str) -> str:
    """Delete the single character at the last ';' in *text*, if any."""
    i = text.rfind(";")
    if i == -1:
        return text
    return text[:i] + text[i+1:]


class Description(NamedTuple):
    """Everything needed to describe one bounded parcel.

    Empty lot, block or city strings are left out of the text.
    Segments are in traversal order starting at the point of beginning
    (or commencement).
    """
    kind: str
    subdivision: str
    county: str
    state: str
    start: Direction
    area: float
    unit: str
    segments: Sequence[Segment] = ()
    lot: str = ""
    block: str = ""
    city: str = ""
    commencement: bool = False

    def header(self) -> str:
        parts = [f"{self.kind} DESCRIPTION:\n\n", "A PART OF "]
        if self.lot:
            parts.append(f"LOT {self.lot}, ")
        if self.block:
            parts.append(f"BLOCK {self.block}, ")
        parts.append(f"{self.subdivision} TO ")
        if self.city:
            parts.append(f"THE CITY OF {self.city}, ")
        parts.append(f"{self.county} COUNTY, {self.state}, "
                     "BEING MORE PARTICULARLY DESCRIBED AS FOLLOWS:\n")
        parts.append("COMMENCING " if self.commencement else "BEGINNING ")
        parts.append(f"AT THE {self.start.describe()} CORNER OF SAID LOT")
        if self.lot:
            parts.append(f" {self.lot}")
        parts.append("; ")
        return "".join(parts)

    def body(self, thread_tangents: bool = THREAD_EXIT_TANGENTS) -> str:
        """THENCE clauses with their transition clauses, before any semicolon removal.

        With *thread_tangents* False every transition is judged against
        a tangent of 0.0; with True it is judged against the previous
        segment's exit tangent.
        """
        parts = []
        prev_tan = 0.0
        for i, seg in enumerate(self.segments):
            if i > 0:
                preamble = seg.transition_preamble(prev_tan)
                logger.debug("segment %d: prev tangent %.9f -> %s", i, prev_tan, preamble)
                parts.append(f"TO {preamble}; ")
            parts.append(f"THENCE {seg.render()} ")
            if thread_tangents:
                prev_tan = seg.exit_tangent()
        return "".join(parts)

    def closing(self) -> str:
        return (f"TO THE POINT OF BEGINNING, CONTAINING {fmt_area(self.area)} "
                f"{self.unit} MORE OR LESS.")

    def render(self, thread_tangents: bool = THREAD_EXIT_TANGENTS) -> str:
        """Formatted legal description text.

        The last semicolon of the assembled text is removed: with two or
        more segments that is the final transition clause's, with a single
        segment it is the corner clause's.
        """
        text = self.header() + self.body(thread_tangents) + self.closing()
        logger.debug("removing last ';' of %d in %d chars", text.count(";"), len(text))
        return drop_last_semicolon(text)
