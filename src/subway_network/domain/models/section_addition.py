"""Structural decisions for adding a section to a line."""

from dataclasses import dataclass
from typing import Literal

from subway_network.domain.models.section import Section


@dataclass(frozen=True)
class Extension:
    """The new section attaches outside the chain, before the head or after the tail."""

    position: Literal["head", "tail"]


@dataclass(frozen=True)
class SplitInsertion:
    """The new section replaces part of `target`; `residual` covers the rest."""

    target: Section
    residual: Section


SectionAddition = Extension | SplitInsertion
