"""WorkTrack: daily attendance and work-hour tracking.

This package is organized by feature modules (users, submissions, reports)
with a thin Flask controller layer over service/repository layers.
"""
