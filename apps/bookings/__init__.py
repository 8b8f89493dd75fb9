"""Bookings app package.

Labor and tractor bookings: pricing, the request/confirm/complete
lifecycle, and the events that notify the other party once a change
has been committed.
"""
