"""Operator base classes and built-in operators."""

from netspine.framework.operators.base import Operator, OperatorCapability, OperatorPhase
from netspine.framework.operators.ips import IpsOperator, ips_dependencies, resolve_ips

__all__ = [
    "Operator",
    "OperatorCapability",
    "OperatorPhase",
    "IpsOperator",
    "ips_dependencies",
    "resolve_ips",
]
