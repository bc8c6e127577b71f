"""Formatting ServiceResult for humans and machines."""
