"""Utility helpers for sqlfluent."""
