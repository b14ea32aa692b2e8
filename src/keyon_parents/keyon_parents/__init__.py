"""Keyon Parents package.

Parent-facing companion service for the Keyon access-control system, organized
by feature modules (metrics, students, permits, classes, notifications, ...)
with a thin Flask controller layer over service/repository layers.
"""
