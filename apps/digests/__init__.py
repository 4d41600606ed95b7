"""Digests app package.

A daily Celery beat task that emails every contributor of a still-active
kitty a summary of all the contributions made to it so far.
"""
