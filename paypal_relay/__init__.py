"""
PayPal checkout relay.

Keeps PayPal REST credentials on the server: the storefront client asks this
service to create and capture orders and the service signs those calls.
"""

__version__ = "1.0.0"
