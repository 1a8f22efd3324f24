"""Agenda - terminal personal agenda."""
