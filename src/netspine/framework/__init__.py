"""
netspine framework - operator infrastructure for tree-evaluating hosts.

This module provides:
- Operator base class, phase tag and capability declaration
- Argument (Expr) and Response types
- Positional argument specifications
- The evaluation context handed to operators
- An explicit, host-owned operator registry

Built-in operators:
- ips: derive addresses from a CIDR block or a base address
"""

from netspine.framework.evaluator import EvaluationContext, ReferenceResolver
from netspine.framework.expr import Expr, ExprType, Response, ResponseType
from netspine.framework.operators import (
    IpsOperator,
    Operator,
    OperatorCapability,
    OperatorPhase,
    ips_dependencies,
    resolve_ips,
)
from netspine.framework.params import ArgumentDef, ArgumentSpec
from netspine.framework.registry import OperatorRegistry, build_default_registry

__all__ = [
    # Evaluation
    "EvaluationContext",
    "ReferenceResolver",
    # Arguments and results
    "Expr",
    "ExprType",
    "Response",
    "ResponseType",
    "ArgumentDef",
    "ArgumentSpec",
    # Operators
    "Operator",
    "OperatorCapability",
    "OperatorPhase",
    "IpsOperator",
    "ips_dependencies",
    "resolve_ips",
    # Registry
    "OperatorRegistry",
    "build_default_registry",
]
