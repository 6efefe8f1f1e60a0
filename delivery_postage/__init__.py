"""
Delivery Postage v1.0.0

Postage request carrier exchanged between the checkout flow and
pluggable delivery modules.
"""
__version__ = "1.0.0"
