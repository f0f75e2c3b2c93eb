"""Polling lobby client.

Everything here runs on one thread: a `Scheduler` drives the poll and
countdown timers, and `LobbySession` gates the screens around them.
"""
