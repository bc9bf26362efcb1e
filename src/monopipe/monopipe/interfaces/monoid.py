# ABOUTME: Abstract semigroup and monoid interfaces
# ABOUTME: State the algebraic laws every pipeline variant has to satisfy

from abc import ABC, abstractmethod
from typing import Self


class AbstractSemigroup(ABC):
    """
    A value with an associative binary operation.

    **ASSOCIATIVITY** ``a.concat(b).concat(c)`` is equivalent to ``a.concat(b.concat(c))``.

    ``b`` must be a value of the same semigroup, and ``concat`` returns a value
    of the same semigroup.
    """

    @abstractmethod
    def concat(self, other: Self) -> Self:
        """
        Combine this value with another value of the same semigroup.

        Args:
            other: Value of the same semigroup.

        Returns:
            A new value of the same semigroup.
        """
        pass


class AbstractMonoid(AbstractSemigroup):
    """
    A semigroup with an identity element.

    **RIGHT IDENTITY** ``m.concat(M.empty())`` is equivalent to ``m``.
    **LEFT IDENTITY** ``M.empty().concat(m)`` is equivalent to ``m``.

    ``empty`` must return a value of the same monoid.
    """

    @abstractmethod
    def empty(self) -> Self:
        """
        Return the identity element of this monoid.
        """
        pass
