"""Feedback Management System backend."""
