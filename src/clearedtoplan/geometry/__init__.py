"""Geometry helpers for weight and balance envelopes."""

from clearedtoplan.geometry.polygon import EnvelopePoint, contains_point, envelope_contains

__all__ = ["EnvelopePoint", "contains_point", "envelope_contains"]
