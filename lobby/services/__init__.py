"""Lobby domain services.

Plain functions over the game store, imported by the HTTP routes so that
validation and ownership rules live apart from request handling.
"""
