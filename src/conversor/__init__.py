"""
Conversor - interactive currency converter

Fetches a base-relative rate table once, then keeps a converted amount in
sync with the selected currencies and the entered amount.
"""

__version__ = "1.0.0"
