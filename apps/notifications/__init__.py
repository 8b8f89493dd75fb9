"""Notifications package.

E-mail delivery for booking events. Called from Celery tasks in the
bookings app, never directly from a request.
"""
