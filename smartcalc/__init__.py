"""smartcalc - interactive calculator for arbitrarily large integers with variables."""

from smartcalc.session import Outcome, Session
from smartcalc.status import Status
from smartcalc.variables import VariableTable

__all__ = ["Outcome", "Session", "Status", "VariableTable"]
