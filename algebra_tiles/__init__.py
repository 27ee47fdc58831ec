"""Algebra tile arrangement, validation and factoring engine."""
