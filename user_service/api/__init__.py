"""
API layer for the EcoMarket user service.

Exposes the user directory endpoints under /api/users (list, get,
register, update, delete, login) and the response presenters.
"""
