"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- INTEGRATIONS_MODE is mock or test
- We want to exercise the frontend end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real clients
  (src/integrations/contracts/interfaces.PaymentProvider).
"""
