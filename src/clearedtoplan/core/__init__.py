"""Ambient services: logging, configuration and the event bus."""
