"""
Process-wide register of the extreme-value families.

Families are stored under their :class:`~pysatl_extremes.types.FamilyName`
in registration order, so distributions can look their family up by name
instead of holding a reference to it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_extremes.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton mapping from family names to :class:`ParametricFamily`.

    All access goes through class methods. The instance is created on first
    use and dropped by :meth:`_reset`.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look a family up by name.

        Raises
        ------
        ValueError
            If ``name`` was never registered.
        """
        try:
            return cls()._families[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def names(cls) -> list[str]:
        """Registered names, oldest first."""
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        """Drop the instance together with every registered family."""
        cls._instance = None
