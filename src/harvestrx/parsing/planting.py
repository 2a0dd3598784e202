"""Species-to-plant parser (``Plant sp1 sp2 ...``)."""

from __future__ import annotations

from harvestrx.core.errors import InputFormatError
from harvestrx.io.reader import LineCursor
from harvestrx.model.prescriptions import SpeciesToPlant
from harvestrx.parsing import names
from harvestrx.parsing.session import ParseSession


def read_species_list(session: ParseSession, cursor: LineCursor) -> SpeciesToPlant:
    """Read one or more distinct, registered species names from ``cursor``."""
    species: list[str] = []
    while (name := cursor.read_word()) != "":
        session.require_species(name, cursor.line_number)
        if name in species:
            raise session.error(
                f"The species {name} appears more than once",
                value=name,
                line_number=cursor.line_number,
            )
        species.append(name)
    if not species:
        raise InputFormatError(f"Missing value for {names.PLANT}", line_number=cursor.line_number)
    return SpeciesToPlant(tuple(species))


def read_species_to_plant(session: ParseSession) -> SpeciesToPlant | None:
    """Read an optional ``Plant`` line; ``None`` when absent."""
    if session.current_name != names.PLANT:
        return None
    return session.read_var_with(names.PLANT, lambda cursor: read_species_list(session, cursor))


__all__ = ["read_species_list", "read_species_to_plant"]
