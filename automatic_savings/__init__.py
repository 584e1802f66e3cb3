"""
Automatic Savings - Source Package

State-transition core of a single-owner savings contract.
Incoming payments are split between a forwarded "spend" portion
and a retained "savings" portion; the owner can flush the
accumulated balance at any time.

DESIGN PRINCIPLES:
1. Every transition is check-then-act
2. Fail early, fail visibly
3. No partial state writes
4. Amounts are never fabricated
5. Storage, bank and address validation are swappable
"""

__version__ = "0.1.0"
__author__ = "Automatic Savings Team"
