"""Payments app package.

Mobile-money payment initiation. ``gateway`` talks to the M-Pesa Daraja API:
it exchanges the consumer credentials for an access token and asks the
provider to push a payment prompt (STK push) to a contributor's phone.
Nothing is persisted here; the provider's callback handler is not
implemented yet.
"""
