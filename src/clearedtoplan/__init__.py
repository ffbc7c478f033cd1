"""ClearedToPlan: calculation core for VFR flight planning.

Weight and balance, performance, navigation log and planning workflow
logic, free of any UI or storage concerns.
"""

__version__ = "0.1.0"
