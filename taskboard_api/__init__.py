"""Taskboard API package.

The HTTP application lives in :mod:`taskboard_api.app` and a small
``requests`` based client for it in :mod:`taskboard_api.client`.
"""
