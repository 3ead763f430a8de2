"""
Contracts (data models).

Request/response shapes shared by the PayPal clients and the API routers:
- Cart line items sent by the storefront
- Access token results
- Normalized upstream responses

Routers and clients rely on these models instead of ad-hoc dicts.
"""
