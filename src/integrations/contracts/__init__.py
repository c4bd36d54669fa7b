"""
Contracts (data models).

This folder defines the request/response shapes for the payment integration:
- the payment intent request built server-side
- the client secret returned by the provider
- the success/error result handed back to the HTTP layer

Both mock and real clients use these contracts.
"""
