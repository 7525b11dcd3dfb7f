"""Babysitting hours tracker.

A JSON API over a single `hours` table plus a small dashboard that talks to
that API, organized by feature (entries, summary, client) with a thin Flask
controller layer over services and repositories.
"""
