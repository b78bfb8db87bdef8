"""Tests for the HabitArcade scoring engine."""
