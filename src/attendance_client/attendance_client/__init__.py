"""Attendance client package.

Organized by feature modules (session, attendance, reports) with a thin Flask
controller layer over plain services and a single HTTP gateway to the backend.
"""
