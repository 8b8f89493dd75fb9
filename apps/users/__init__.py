"""Users app package.

Defines the marketplace profile used as AUTH_USER_MODEL
(``apps.users.models.Profile``) together with registration, login and
self-service profile endpoints.
"""
