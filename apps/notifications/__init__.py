"""Notifications app package.

Delivers the emails VaultFund sends: kitty-created and
contribution-received confirmations, the daily contribution digest and the
welcome mail. The transport sits behind a pluggable notifier backend so
components can be handed a fake in tests; confirmations are delivered on a
Celery worker and never block the request that triggered them.
"""
