"""Application package for the Taskboard API."""
