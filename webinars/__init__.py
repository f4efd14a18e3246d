"""Webinar management backend."""
