"""Core module for the Elitescope backend."""
