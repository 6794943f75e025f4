"""Elitescope backend package."""
