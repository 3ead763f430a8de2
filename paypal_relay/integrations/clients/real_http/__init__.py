"""
Real HTTP integration clients.

These clients talk to the PayPal REST API over httpx:
- paypal_auth: exchanges client credentials for a bearer token
- paypal_orders: creates and captures Orders v2 orders

Important:
- Must return data shaped according to paypal_relay/integrations/contracts/*
- Every call obtains a fresh token; nothing is cached between requests.
"""
