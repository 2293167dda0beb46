"""Core easing library for easekit."""
