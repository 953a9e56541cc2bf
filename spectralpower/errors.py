# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

class DimensionMismatch(ValueError):
    """The length of a vector does not match the dimension of an operator."""

class DegenerateVector(ArithmeticError):
    """
    A vector can not be normalized, because its norm is numerically zero. Raised if the
    operator maps the current estimate to (almost) zero. Restart with another initial vector.
    """
