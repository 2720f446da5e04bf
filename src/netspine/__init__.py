"""
netspine - network address operators for tree-evaluating document hosts.

- netspine.core: address arithmetic, cursors, errors, settings, logging
- netspine.framework: operator interface, registry and the ``ips`` operator
"""

__version__ = "0.1.0"

from netspine.core import *  # noqa
