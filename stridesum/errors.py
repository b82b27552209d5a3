# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

class StrideSumError(Exception):
    """Base class for all contraction request errors."""

class ShapeMismatchError(StrideSumError, ValueError):
    """
    An operand is not a dense flat buffer, its size does not match its shape
    or its label count does not match its rank.
    """

    def __init__(self, message: str, *, operand: Optional[str] = None) -> None:
        super().__init__(_format_operand(message, operand))
        self.operand = operand

class AxisMismatchError(StrideSumError, ValueError):
    """
    A named axis is reused with different sizes or the output carries more
    labels than both inputs together.
    """

    def __init__(self, message: str, *, operand: Optional[str] = None) -> None:
        super().__init__(_format_operand(message, operand))
        self.operand = operand

def _format_operand(message: str, operand: Optional[str]) -> str:
    if operand is None:
        return message
    return f"Operand {operand}: {message}"
