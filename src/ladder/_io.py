"""Loading and exporting circuit descriptions as TOML."""

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from ._circuit import CircuitSpec
from ._errors import CircuitError

logger = logging.getLogger(__name__)


def load_circuit(path: Path) -> CircuitSpec:
    """Load and validate a circuit description from a TOML file.

    The file lists contacts as an array of tables, root first:

    .. code-block:: toml

        name = "and"

        [[contacts]]
        name = "root"

        [[contacts]]
        name = "series"
        parent = "root"
        arrangement = "series"

    Args:
        path: Path to the TOML file.

    Returns:
        The validated CircuitSpec.

    Raises:
        CircuitError: If the file is not valid TOML or not a valid circuit.

    """
    logger.debug("Loading circuit from %s", path)
    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {path}: {e}"
            raise CircuitError(msg) from e

    try:
        return CircuitSpec.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid circuit in {path}: {e}"
        raise CircuitError(msg) from e


def _serialize_circuit(spec: CircuitSpec) -> dict[str, Any]:
    """Convert a circuit to TOML-compatible data.

    Default-valued contact fields are left out so exported files stay close
    to hand-written ones. Shorts use their ``from``/``to`` aliases.
    """
    data: dict[str, Any] = {"name": spec.name}
    data["contacts"] = [contact.model_dump(mode="json", exclude_defaults=True) for contact in spec.contacts]
    if spec.shorts:
        data["shorts"] = [short.model_dump(mode="json", by_alias=True) for short in spec.shorts]
    return data


def export_circuit(spec: CircuitSpec, path: Path) -> None:
    """Write a circuit description to a TOML file."""
    with path.open("wb") as f:
        tomli_w.dump(_serialize_circuit(spec), f)
    logger.debug("Exported circuit %r to %s", spec.name, path)
