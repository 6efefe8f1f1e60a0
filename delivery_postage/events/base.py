"""
Action event base

Common state for events exchanged between the checkout flow and its
listeners: propagation flag and a free parameter bag.
"""
from typing import Any, Dict


class ActionEvent:
    """Base class for all action events."""

    def __init__(self):
        self._propagation_stopped = False
        self._parameters: Dict[str, Any] = {}

    def stop_propagation(self) -> None:
        """Tell later listeners not to process this event."""
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def get_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def set_parameter(self, name: str, value: Any) -> "ActionEvent":
        self._parameters[name] = value
        return self
